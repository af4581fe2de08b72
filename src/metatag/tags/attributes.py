"""Attribute access for tag instances and tag kinds.

Attributes are the dataclass fields of a tag kind. Lookups are forgiving:
an unknown attribute name yields ``None`` rather than an error.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from metatag.tags.model import Tag

VALUE: str = "value"
"""Conventional name of a single-attribute tag's attribute."""


def _fields(kind: type) -> dict[str, dataclasses.Field[Any]]:
    if not dataclasses.is_dataclass(kind):
        return {}
    return {f.name: f for f in dataclasses.fields(kind)}


def get_value(tag: Tag, attribute_name: str = VALUE) -> Any:
    """Return the value bound to ``attribute_name`` on ``tag``, or ``None``."""
    if attribute_name not in _fields(type(tag)):
        return None
    return getattr(tag, attribute_name)


def get_default_value(tag: Tag | type[Tag], attribute_name: str = VALUE) -> Any:
    """Return the declared default of ``attribute_name``.

    ``tag`` may be a tag instance or a tag kind. Returns ``None`` when the
    attribute does not exist or declares no default.
    """
    kind = tag if isinstance(tag, type) else type(tag)
    declared = _fields(kind).get(attribute_name)
    if declared is None:
        return None
    if declared.default is not dataclasses.MISSING:
        return declared.default
    if declared.default_factory is not dataclasses.MISSING:
        return declared.default_factory()
    return None


def tag_attributes(tag: Tag) -> dict[str, Any]:
    """Return all attribute values of ``tag`` in field declaration order."""
    return {name: getattr(tag, name) for name in _fields(type(tag))}
