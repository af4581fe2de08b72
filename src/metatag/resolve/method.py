"""Tag resolution for methods.

Tags on a method are not inherited by overriding methods, so resolution has
to walk the hierarchy explicitly. Search order:

1. the method itself, directly or through one level of meta-tags;
2. the equivalent method on each interface the declaring class implements;
3. for each superclass, nearest first: the equivalent method declared there,
   then the equivalent method on that superclass's interfaces.

The walk never enters ``object``.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from metatag.core.errors import require
from metatag.introspect import DEFAULT_INTROSPECTOR, ElementIntrospector
from metatag.resolve.declaration import first_of_kind
from metatag.resolve.index import DEFAULT_INDEX, InterfaceTagIndex
from metatag.tags.model import MethodRef, Tag

logger = logging.getLogger(__name__)


class MethodResolver:
    """Finds the tag of a given kind that applies to a method.

    Parameters
    ----------
    introspector:
        Element introspector; defaults to the shared ``PythonIntrospector``.
    index:
        Interface memo consulted before scanning an interface. Defaults to
        the process-wide ``DEFAULT_INDEX``, or to a private index when a
        custom ``introspector`` is given.
    """

    def __init__(
        self,
        introspector: ElementIntrospector | None = None,
        index: InterfaceTagIndex | None = None,
    ) -> None:
        self._introspector = introspector or DEFAULT_INTROSPECTOR
        if index is None:
            index = DEFAULT_INDEX if introspector is None else InterfaceTagIndex(introspector)
        self._index = index

    @property
    def index(self) -> InterfaceTagIndex:
        return self._index

    def get_tag(self, element: Any, tag_kind: type) -> Tag | None:
        """Return a ``tag_kind`` tag on ``element`` or on one of its tags' kinds.

        ``element`` may be a ``MethodRef`` (direct tags only) or a class
        (present tags, i.e. including inherited ones). Meta-tags are looked
        up exactly one level deep.
        """
        require(element, "element")
        require(tag_kind, "tag_kind")
        introspector = self._introspector
        if isinstance(element, type):
            tags = introspector.present_tags(element)
        else:
            tags = introspector.direct_tags(element)
        tag = first_of_kind(tags, tag_kind, introspector)
        if tag is not None:
            return tag
        for candidate in tags:
            meta = introspector.present_tags(introspector.tag_kind(candidate))
            tag = first_of_kind(meta, tag_kind, introspector)
            if tag is not None:
                return tag
        return None

    def resolve(self, method: Any, tag_kind: type) -> Tag | None:
        """Return the ``tag_kind`` tag applying to ``method``, or ``None``.

        Parameters
        ----------
        method:
            A ``MethodRef`` or a bound method.
        tag_kind:
            The tag kind to look for.

        Raises
        ------
        InvalidArgumentError
            If ``method`` or ``tag_kind`` is ``None``.
        """
        require(method, "method")
        require(tag_kind, "tag_kind")
        method = MethodRef.coerce(method)
        introspector = self._introspector
        root = introspector.root_type()

        tag = self.get_tag(method, tag_kind)
        cls: type | None = method.declaring_type
        if tag is None:
            tag = self._search_on_interfaces(method, tag_kind, introspector.interfaces(cls))
        while tag is None:
            cls = introspector.superclass(cls)
            if cls is None or cls is root:
                break
            equivalent = introspector.find_declared_method(cls, method)
            if equivalent is not None:
                tag = self.get_tag(equivalent, tag_kind)
            if tag is None:
                tag = self._search_on_interfaces(method, tag_kind, introspector.interfaces(cls))
            if tag is not None:
                logger.debug(
                    "Resolved %s on %s via superclass %s",
                    tag_kind.__qualname__,
                    method,
                    cls.__qualname__,
                )
        return tag

    def _search_on_interfaces(
        self, method: MethodRef, tag_kind: type, interfaces: Iterable[type]
    ) -> Tag | None:
        for iface in interfaces:
            if not self._index.has_tagged_methods(iface):
                continue
            equivalent = self._introspector.find_method(iface, method)
            if equivalent is None:
                continue
            tag = self.get_tag(equivalent, tag_kind)
            if tag is not None:
                return tag
        return None
