"""Locating the class that declares a tag.

Python's attribute lookup cannot tell which class in a hierarchy actually
declared a tag, since tags presented through ``Inherited`` look identical to
local ones. ``DeclarationLocator`` answers that explicitly.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from metatag.core.errors import InvalidArgumentError, require
from metatag.introspect import DEFAULT_INTROSPECTOR, ElementIntrospector
from metatag.tags.model import Tag


def first_of_kind(
    tags: Iterable[Tag], tag_kind: type, introspector: ElementIntrospector
) -> Tag | None:
    """Return the first tag in ``tags`` whose kind *is* ``tag_kind``."""
    for tag in tags:
        if introspector.tag_kind(tag) is tag_kind:
            return tag
    return None


class DeclarationLocator:
    """Answers "where is this tag kind declared?" for a class hierarchy.

    Parameters
    ----------
    introspector:
        Element introspector; defaults to the shared ``PythonIntrospector``.
    """

    def __init__(self, introspector: ElementIntrospector | None = None) -> None:
        self._introspector = introspector or DEFAULT_INTROSPECTOR

    def is_locally_declared(self, tag_kind: type, cls: type) -> bool:
        """Return True if ``cls`` itself declares a tag of ``tag_kind``.

        Inheritance is not considered; use :meth:`is_inherited` for that.

        Raises
        ------
        InvalidArgumentError
            If ``tag_kind`` or ``cls`` is ``None``.
        """
        require(tag_kind, "tag_kind")
        require(cls, "cls")
        tags = self._introspector.direct_tags(cls)
        return first_of_kind(tags, tag_kind, self._introspector) is not None

    def is_inherited(self, tag_kind: type, cls: type) -> bool:
        """Return True if ``tag_kind`` is present on ``cls`` but not declared there.

        Only superclasses contribute inherited tags, and only for kinds
        carrying the ``Inherited`` meta-tag; interfaces never do.

        Raises
        ------
        InvalidArgumentError
            If ``tag_kind`` or ``cls`` is ``None``.
        """
        require(tag_kind, "tag_kind")
        require(cls, "cls")
        present = self._introspector.present_tags(cls)
        if first_of_kind(present, tag_kind, self._introspector) is None:
            return False
        return not self.is_locally_declared(tag_kind, cls)

    def find_declaring_class(self, tag_kind: type, cls: type | None) -> type | None:
        """Return ``cls`` or its nearest superclass declaring ``tag_kind``.

        The walk stops before the root type. For an interface only the
        interface itself is checked. Returns ``None`` when ``cls`` is
        ``None`` or no class in the chain declares the kind.

        Raises
        ------
        InvalidArgumentError
            If ``tag_kind`` is ``None``.
        """
        require(tag_kind, "tag_kind")
        return self.find_declaring_class_for_any_of((tag_kind,), cls)

    def find_declaring_class_for_any_of(
        self, tag_kinds: Sequence[type], cls: type | None
    ) -> type | None:
        """Return the nearest class in ``cls``'s chain declaring any of ``tag_kinds``.

        At each class the kinds are tested in the order given.

        Raises
        ------
        InvalidArgumentError
            If ``tag_kinds`` is empty.
        """
        if not tag_kinds:
            raise InvalidArgumentError(
                "tag_kinds", "The collection of tag kinds must not be empty"
            )
        root = self._introspector.root_type()
        while cls is not None and cls is not root:
            for tag_kind in tag_kinds:
                if self.is_locally_declared(tag_kind, cls):
                    return cls
            cls = self._introspector.superclass(cls)
        return None
