"""Shared test fixtures for metatag.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

import pytest

from metatag.introspect import PythonIntrospector
from metatag.resolve import InterfaceTagIndex, MethodResolver
from metatag.tags.model import MethodRef


class CountingIntrospector(PythonIntrospector):
    """PythonIntrospector that records how often each interface is scanned."""

    def __init__(self) -> None:
        self.scans: Counter[type] = Counter()

    def methods(self, interface: type) -> Iterator[MethodRef]:
        self.scans[interface] += 1
        return super().methods(interface)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "metatag"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def counting_introspector() -> CountingIntrospector:
    return CountingIntrospector()


@pytest.fixture()
def fresh_index(counting_introspector: CountingIntrospector) -> InterfaceTagIndex:
    """An empty index so tests never observe the process-wide one."""
    return InterfaceTagIndex(counting_introspector)


@pytest.fixture()
def method_resolver(
    counting_introspector: CountingIntrospector, fresh_index: InterfaceTagIndex
) -> MethodResolver:
    return MethodResolver(counting_introspector, fresh_index)
