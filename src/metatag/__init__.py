"""metatag — tag resolution for Python classes and methods.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    from dataclasses import dataclass

    import metatag
    from metatag import Inherited, Tag, interface

    @Inherited()
    @dataclass(frozen=True)
    class Service(Tag):
        value: str = ""

    @dataclass(frozen=True)
    class Transactional(Tag):
        read_only: bool = False

    @interface
    class Repository:
        @Transactional(read_only=True)
        def find(self, key): ...

    @Service("users")
    class UserRepository(Repository):
        def find(self, key): ...

    class CachedUserRepository(UserRepository):
        pass

    metatag.resolve_on_type(CachedUserRepository, Service)
    # Service(value='users')
    metatag.resolve_on_method(
        metatag.MethodRef.of(UserRepository, "find"), Transactional
    )
    # Transactional(read_only=True)
    metatag.find_declaring_class(Service, CachedUserRepository)
    # <class 'UserRepository'>

    metatag.__version__
    '0.1.0'
"""
from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from metatag.core.errors import (
    DuplicateTagError,
    InvalidArgumentError,
    MetatagError,
    MethodNotFoundError,
)
from metatag.tags import (
    VALUE,
    Inherited,
    MethodRef,
    Tag,
    get_default_value,
    get_value,
    interface,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from collections.abc import Sequence


def get_tag(element: Any, tag_kind: type) -> Tag | None:
    """Return a ``tag_kind`` tag on ``element`` itself or one meta-tag level down.

    No hierarchy search is performed; see :func:`resolve_on_method` and
    :func:`resolve_on_type` for that.
    """
    from metatag.resolve.method import MethodResolver

    if inspect.ismethod(element):
        element = MethodRef.coerce(element)
    return MethodResolver().get_tag(element, tag_kind)


def resolve_on_method(method: Any, tag_kind: type) -> Tag | None:
    """Find the ``tag_kind`` tag applying to a method.

    Parameters
    ----------
    method:
        A ``MethodRef``, a bound method or a method read off a
        module-level class (``UserRepository.find``).
    tag_kind:
        The tag kind to look for.

    Returns
    -------
    Tag | None
        The first match on the method, its interfaces or its superclasses'
        equivalent methods, or ``None``.
    """
    from metatag.resolve.method import MethodResolver

    return MethodResolver().resolve(method, tag_kind)


def resolve_on_type(cls: type, tag_kind: type) -> Tag | None:
    """Find the ``tag_kind`` tag applying to a class.

    Interfaces, meta-tags and superclasses are searched depth-first.
    """
    from metatag.resolve.type_resolver import TypeResolver

    return TypeResolver().resolve(cls, tag_kind)


def is_locally_declared(tag_kind: type, cls: type) -> bool:
    """Return True if ``cls`` itself declares a ``tag_kind`` tag."""
    from metatag.resolve.declaration import DeclarationLocator

    return DeclarationLocator().is_locally_declared(tag_kind, cls)


def is_inherited(tag_kind: type, cls: type) -> bool:
    """Return True if ``cls`` presents a ``tag_kind`` tag it does not declare."""
    from metatag.resolve.declaration import DeclarationLocator

    return DeclarationLocator().is_inherited(tag_kind, cls)


def find_declaring_class(tag_kind: type, cls: type | None) -> type | None:
    """Return ``cls`` or the nearest superclass that declares ``tag_kind``."""
    from metatag.resolve.declaration import DeclarationLocator

    return DeclarationLocator().find_declaring_class(tag_kind, cls)


def find_declaring_class_for_any_of(
    tag_kinds: "Sequence[type]", cls: type | None
) -> type | None:
    """Return the nearest class in the chain that declares any of ``tag_kinds``."""
    from metatag.resolve.declaration import DeclarationLocator

    return DeclarationLocator().find_declaring_class_for_any_of(tag_kinds, cls)


__all__ = [
    "__version__",
    "DuplicateTagError",
    "Inherited",
    "InvalidArgumentError",
    "MetatagError",
    "MethodNotFoundError",
    "MethodRef",
    "Tag",
    "VALUE",
    "find_declaring_class",
    "find_declaring_class_for_any_of",
    "get_default_value",
    "get_tag",
    "get_value",
    "interface",
    "is_inherited",
    "is_locally_declared",
    "resolve_on_method",
    "resolve_on_type",
]
