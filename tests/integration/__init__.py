"""Integration tests.

Integration tests exercise the public API end to end, including the
process-wide interface index shared across threads. They are kept in a
separate directory so they can be excluded from the fast unit-test run
with ``pytest tests/unit/``.
"""
from __future__ import annotations
