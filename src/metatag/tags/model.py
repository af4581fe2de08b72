"""Tag model: how tags are declared on and attached to Python elements.

A tag kind is a subclass of :class:`Tag`, normally a frozen dataclass whose
fields are the tag's attributes. A tag instance doubles as a decorator::

    @dataclass(frozen=True)
    class Transactional(Tag):
        value: str = ""
        read_only: bool = False

    class Repository:
        @Transactional(read_only=True)
        def find(self, key): ...

Tags are stamped onto the decorated object's own ``__dict__`` under
``TAGS_ATTR`` so that a subclass never reports a parent's tags as its own.
"""
from __future__ import annotations

import inspect
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from metatag.core.errors import DuplicateTagError, MethodNotFoundError

logger = logging.getLogger(__name__)

TAGS_ATTR: str = "__metatags__"
"""Attribute name storing the tuple of tags attached to an element."""

INTERFACE_ATTR: str = "__metatag_interface__"
"""Attribute name marking a class as an interface."""

_T = TypeVar("_T")

Signature = tuple[str, ...]


def _unwrap(target: Any) -> Any:
    """Return the object that actually carries tags for ``target``."""
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    if isinstance(target, property):
        return target.fget
    return target


def _describe(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


def _owner_of(function: Any) -> type | None:
    """Return the class a function was defined in, from its ``__qualname__``."""
    path = function.__qualname__.split(".")[:-1]
    if not path or "<locals>" in path:
        return None
    owner: Any = sys.modules.get(function.__module__)
    for part in path:
        owner = getattr(owner, part, None)
    return owner if isinstance(owner, type) else None


def tags_of(target: Any) -> tuple[Tag, ...]:
    """Return the tags attached directly to ``target``, in source order.

    Only ``target``'s own namespace is consulted, never inherited
    attributes.
    """
    carrier = _unwrap(target)
    namespace = getattr(carrier, "__dict__", None)
    if namespace is None:
        return ()
    return tuple(namespace.get(TAGS_ATTR, ()))


def attach(target: _T, tag: Tag) -> _T:
    """Attach ``tag`` to ``target`` and return ``target`` unchanged.

    Decorators apply bottom-up, so each new tag is prepended to keep the
    stored order identical to the order written in the source.

    Raises
    ------
    TypeError
        If ``target`` cannot carry tags (no writable ``__dict__``).
    DuplicateTagError
        If ``target`` already carries a tag of the same kind.
    """
    carrier = _unwrap(target)
    if carrier is None or not hasattr(carrier, "__dict__"):
        raise TypeError(
            f"Cannot tag {target!r} with {type(tag).__name__}: "
            "only classes, functions and method descriptors carry tags."
        )
    existing = tags_of(carrier)
    if any(type(t) is type(tag) for t in existing):
        raise DuplicateTagError(type(tag).__qualname__, _describe(carrier))
    setattr(carrier, TAGS_ATTR, (tag, *existing))
    logger.debug("Attached %r to %s", tag, _describe(carrier))
    return target


class Tag:
    """Base class for all tag kinds.

    Calling a tag instance attaches it to the decorated element.
    """

    def __call__(self, target: _T) -> _T:
        return attach(target, self)


@dataclass(frozen=True)
class Inherited(Tag):
    """Meta-tag: tags of the marked kind propagate to subclasses."""


def interface(cls: type[_T]) -> type[_T]:
    """Class decorator marking ``cls`` as an interface.

    A class's interfaces are its direct bases marked this way; every other
    base is part of its superclass chain.
    """
    setattr(cls, INTERFACE_ATTR, True)
    return cls


def is_interface(cls: Any) -> bool:
    """Return True if ``cls`` itself (not a base) is marked as an interface."""
    return isinstance(cls, type) and bool(cls.__dict__.get(INTERFACE_ATTR, False))


def is_method_like(member: Any) -> bool:
    """Return True for members that can be resolved as methods."""
    if isinstance(member, (staticmethod, classmethod)):
        return True
    if isinstance(member, property):
        return member.fget is not None
    return inspect.isfunction(member)


def method_signature(function: Callable[..., Any]) -> Signature | None:
    """Return the comparable shape of ``function``'s parameters.

    The shape is the sequence of parameter kinds; keyword-only parameters
    also contribute their name since callers address them by name.
    Returns ``None`` when the callable has no inspectable signature.
    """
    try:
        parameters = inspect.signature(function).parameters.values()
    except (TypeError, ValueError):
        return None
    shape: list[str] = []
    for param in parameters:
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            shape.append(f"{param.kind.name}:{param.name}")
        else:
            shape.append(param.kind.name)
    return tuple(shape)


@dataclass(frozen=True)
class MethodRef:
    """A method as seen on the class that declares it.

    Identity is the declaring class, the name and the signature shape; the
    underlying function object is carried along but not compared.

    Parameters
    ----------
    declaring_type:
        The class whose namespace holds the member.
    name:
        The member name.
    signature:
        Parameter shape from :func:`method_signature`, or ``None``.
    function:
        The raw member (function, ``staticmethod``, ``classmethod`` or
        ``property``).
    """

    declaring_type: type
    name: str
    signature: Signature | None
    function: Any = field(compare=False, repr=False)

    @classmethod
    def from_member(cls, owner: type, name: str, member: Any) -> MethodRef:
        """Build a reference for ``member`` found in ``owner``'s namespace."""
        return cls(owner, name, method_signature(_unwrap(member)), member)

    @classmethod
    def of(cls, owner: type, name: str) -> MethodRef:
        """Find ``name`` along ``owner``'s MRO and return its reference.

        Raises
        ------
        MethodNotFoundError
            If no class in the MRO (``object`` excluded) declares a method
            called ``name``.
        """
        for klass in owner.__mro__:
            if klass is object:
                break
            member = klass.__dict__.get(name)
            if member is not None and is_method_like(member):
                return cls.from_member(klass, name, member)
        raise MethodNotFoundError(owner.__qualname__, name)

    @classmethod
    def coerce(cls, method: Any) -> MethodRef:
        """Accept a ``MethodRef``, a bound method or a function read off a class.

        ``Impl.run`` is located through its ``__qualname__``, so functions
        defined inside another function's body cannot be coerced.
        """
        if isinstance(method, MethodRef):
            return method
        bound_to = getattr(method, "__self__", None)
        function = getattr(method, "__func__", None)
        if bound_to is not None and function is not None:
            owner = bound_to if isinstance(bound_to, type) else type(bound_to)
        elif inspect.isfunction(method):
            owner, function = _owner_of(method), method
        else:
            owner = None
        if owner is None:
            raise TypeError(
                f"Cannot resolve {method!r}: pass a MethodRef, a bound method "
                "or a method of a module-level class."
            )
        for klass in owner.__mro__:
            member = klass.__dict__.get(method.__name__)
            if member is not None and _unwrap(member) is function:
                return cls.from_member(klass, method.__name__, member)
        return cls.of(owner, method.__name__)

    @property
    def tags(self) -> tuple[Tag, ...]:
        """Tags attached directly to this method."""
        return tags_of(self.function)

    def __str__(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.name}"
