"""Core domain logic.

Holds the error hierarchy shared by every other subpackage.
Submodules in core/ should not import from resolve/ or cli/.
"""
from __future__ import annotations

from metatag.core.errors import (
    DuplicateTagError,
    InvalidArgumentError,
    MetatagError,
    MethodNotFoundError,
)

__all__ = [
    "DuplicateTagError",
    "InvalidArgumentError",
    "MetatagError",
    "MethodNotFoundError",
]
