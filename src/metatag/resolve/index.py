"""Memo of which interfaces carry tagged methods.

Scanning every method of an interface is the most expensive step of method
resolution, and its answer never changes once a class exists. The index
records the answer per interface for the lifetime of the index.
"""
from __future__ import annotations

import logging
import threading

from metatag.core.errors import require
from metatag.introspect import DEFAULT_INTROSPECTOR, ElementIntrospector

logger = logging.getLogger(__name__)


class InterfaceTagIndex:
    """Thread-safe memo: interface -> "has at least one tagged method".

    Entries are never evicted or invalidated. A single lock covers the
    check-and-populate step; population is a pure function of the
    interface, so a second population could only recompute the same value.

    Parameters
    ----------
    introspector:
        Source of interface methods and their tags. Defaults to the shared
        ``PythonIntrospector``.
    """

    def __init__(self, introspector: ElementIntrospector | None = None) -> None:
        self._introspector = introspector or DEFAULT_INTROSPECTOR
        self._lock = threading.Lock()
        self._entries: dict[type, bool] = {}
        self._scan_count = 0

    def has_tagged_methods(self, interface: type) -> bool:
        """Return True if any method of ``interface`` carries any tag.

        Raises
        ------
        InvalidArgumentError
            If ``interface`` is ``None``.
        """
        require(interface, "interface")
        with self._lock:
            flag = self._entries.get(interface)
            if flag is not None:
                return flag
            self._scan_count += 1
            found = any(
                self._introspector.direct_tags(method)
                for method in self._introspector.methods(interface)
            )
            self._entries[interface] = found
            logger.debug(
                "Indexed interface %s: tagged methods=%s",
                getattr(interface, "__qualname__", interface),
                found,
            )
            return found

    @property
    def scan_count(self) -> int:
        """Number of interface scans performed (cache misses)."""
        return self._scan_count

    def clear(self) -> None:
        """Drop every entry. The resolvers never call this."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, interface: object) -> bool:
        with self._lock:
            return interface in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"InterfaceTagIndex(entries={len(self)}, scans={self._scan_count})"


DEFAULT_INDEX: InterfaceTagIndex = InterfaceTagIndex()
"""Process-wide index shared by resolvers built on the default introspector."""
