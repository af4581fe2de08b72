"""Tag resolution: methods, classes, declaring classes and the interface memo."""
from __future__ import annotations

from metatag.resolve.declaration import DeclarationLocator, first_of_kind
from metatag.resolve.index import DEFAULT_INDEX, InterfaceTagIndex
from metatag.resolve.method import MethodResolver
from metatag.resolve.type_resolver import TypeResolver

__all__ = [
    "DEFAULT_INDEX",
    "DeclarationLocator",
    "InterfaceTagIndex",
    "MethodResolver",
    "TypeResolver",
    "first_of_kind",
]
