"""Element introspection for tag resolution.

The resolvers never touch ``__dict__`` or ``__bases__`` directly; they ask
an :class:`ElementIntrospector`. :class:`PythonIntrospector` is the
implementation for ordinary Python classes using the conventions of
:mod:`metatag.tags.model`. Alternative implementations can expose other
metadata sources (generated stubs, schema registries) behind the same
contract.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from metatag.tags.attributes import get_default_value, get_value
from metatag.tags.model import (
    Inherited,
    MethodRef,
    Tag,
    is_interface,
    is_method_like,
    tags_of,
)

Element = Any  # a class or a MethodRef


def is_private_name(name: str) -> bool:
    """Return True for ``_name`` members; ``__dunder__`` protocol methods are public."""
    return name.startswith("_") and not (name.startswith("__") and name.endswith("__"))


class ElementIntrospector(ABC):
    """Abstract base for everything the resolvers need to know about elements.

    Implementations must be stateless or thread-safe; resolvers call them
    concurrently.
    """

    @abstractmethod
    def direct_tags(self, element: Element) -> tuple[Tag, ...]:
        """Return the tags declared on ``element`` itself, in source order."""

    @abstractmethod
    def present_tags(self, cls: type) -> tuple[Tag, ...]:
        """Return the tags effectively present on ``cls``.

        This is the direct tags plus tags contributed by superclasses for
        inheritance-eligible kinds.
        """

    @abstractmethod
    def interfaces(self, cls: type) -> tuple[type, ...]:
        """Return the interfaces ``cls`` declares directly, in order."""

    @abstractmethod
    def superclass(self, cls: type) -> type | None:
        """Return the superclass of ``cls``, or ``None`` for roots and interfaces."""

    @abstractmethod
    def methods(self, interface: type) -> Iterator[MethodRef]:
        """Yield every public method of ``interface``, inherited ones included."""

    @abstractmethod
    def find_declared_method(self, cls: type, method: MethodRef) -> MethodRef | None:
        """Return the method equivalent to ``method`` declared on ``cls`` itself."""

    @abstractmethod
    def find_method(self, cls: type, method: MethodRef) -> MethodRef | None:
        """Return the public method equivalent to ``method`` visible on ``cls``."""

    def tag_kind(self, tag: Tag) -> type:
        """Return the kind of ``tag``."""
        return type(tag)

    def root_type(self) -> type:
        """Return the universal root type; searches stop before it."""
        return object

    def is_tag_kind(self, cls: type) -> bool:
        """Return True if ``cls`` is itself a tag kind."""
        return isinstance(cls, type) and issubclass(cls, Tag)

    def attribute_value(self, tag: Tag, name: str) -> Any:
        """Return the value of attribute ``name`` on ``tag``, or ``None``."""
        return get_value(tag, name)

    def default_value(self, tag_kind: type, name: str) -> Any:
        """Return the declared default of attribute ``name``, or ``None``."""
        return get_default_value(tag_kind, name)


class PythonIntrospector(ElementIntrospector):
    """Introspector for plain Python classes.

    - Tags live in each element's own ``__dict__`` (see ``attach``).
    - Interfaces are the direct bases decorated with ``@interface``.
    - The superclass is the first base that is not an interface, falling
      back to ``object``; interfaces and ``object`` have none.
    - Equivalent methods share a name and a signature shape.
    - Only the superclass chain is walked for inherited methods. Further
      non-interface bases (mixins) are not searched.
    - Interface methods are the public ones. Underscore-prefixed names are
      private unless they are ``__dunder__`` protocol methods.
    """

    def direct_tags(self, element: Element) -> tuple[Tag, ...]:
        if isinstance(element, MethodRef):
            return element.tags
        return tags_of(element)

    def present_tags(self, cls: type) -> tuple[Tag, ...]:
        present = list(self.direct_tags(cls))
        seen = {self.tag_kind(t) for t in present}
        ancestor = self.superclass(cls)
        while ancestor is not None:
            for tag in self.direct_tags(ancestor):
                kind = self.tag_kind(tag)
                if kind not in seen and self.is_inheritable(kind):
                    present.append(tag)
                    seen.add(kind)
            ancestor = self.superclass(ancestor)
        return tuple(present)

    def is_inheritable(self, tag_kind: type) -> bool:
        """Return True if ``tag_kind`` carries the ``Inherited`` meta-tag."""
        return any(isinstance(t, Inherited) for t in self.direct_tags(tag_kind))

    def interfaces(self, cls: type) -> tuple[type, ...]:
        return tuple(base for base in cls.__bases__ if is_interface(base))

    def superclass(self, cls: type) -> type | None:
        if cls is object or is_interface(cls):
            return None
        for base in cls.__bases__:
            if not is_interface(base):
                return base
        return object

    def methods(self, interface: type) -> Iterator[MethodRef]:
        seen: set[str] = set()
        for klass in interface.__mro__:
            if klass is object:
                break
            for name, member in vars(klass).items():
                if is_private_name(name) or name in seen or not is_method_like(member):
                    continue
                seen.add(name)
                yield MethodRef.from_member(klass, name, member)

    def find_declared_method(self, cls: type, method: MethodRef) -> MethodRef | None:
        if cls is object:
            return None
        return self._match(cls, cls.__dict__.get(method.name), method)

    def find_method(self, cls: type, method: MethodRef) -> MethodRef | None:
        if is_private_name(method.name):
            return None
        for klass in cls.__mro__:
            if klass is object:
                break
            if method.name in klass.__dict__:
                return self._match(klass, klass.__dict__[method.name], method)
        return None

    def _match(self, owner: type, member: Any, method: MethodRef) -> MethodRef | None:
        if member is None or not is_method_like(member):
            return None
        candidate = MethodRef.from_member(owner, method.name, member)
        if None in (candidate.signature, method.signature):
            return candidate
        return candidate if candidate.signature == method.signature else None
