"""Tag declaration and attachment.

Declare a tag kind as a frozen dataclass deriving from ``Tag`` and use its
instances as decorators on classes and methods.
"""
from __future__ import annotations

from metatag.tags.attributes import VALUE, get_default_value, get_value, tag_attributes
from metatag.tags.model import (
    Inherited,
    MethodRef,
    Tag,
    attach,
    interface,
    is_interface,
    tags_of,
)

__all__ = [
    "Inherited",
    "MethodRef",
    "Tag",
    "VALUE",
    "attach",
    "get_default_value",
    "get_value",
    "interface",
    "is_interface",
    "tag_attributes",
    "tags_of",
]
