"""Introspection collaborators used by the resolvers."""
from __future__ import annotations

from metatag.introspect.introspector import ElementIntrospector, PythonIntrospector

DEFAULT_INTROSPECTOR: PythonIntrospector = PythonIntrospector()
"""Shared stateless introspector used when a resolver is given none."""

__all__ = ["DEFAULT_INTROSPECTOR", "ElementIntrospector", "PythonIntrospector"]
