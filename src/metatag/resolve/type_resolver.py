"""Tag resolution for classes.

Depth-first, first match wins:

1. tags present on the class (own plus inherited);
2. each declared interface, recursively;
3. unless the class is itself a tag kind, the kind of each tag present on
   it, recursively (meta-tags);
4. the superclass, recursively, stopping before ``object``.

Every class is visited at most once per call, so tag kinds that tag each
other cannot send the search into a loop.
"""
from __future__ import annotations

import logging

from metatag.core.errors import require
from metatag.introspect import DEFAULT_INTROSPECTOR, ElementIntrospector
from metatag.resolve.declaration import first_of_kind
from metatag.tags.model import Tag

logger = logging.getLogger(__name__)


class TypeResolver:
    """Finds the tag of a given kind that applies to a class.

    Parameters
    ----------
    introspector:
        Element introspector; defaults to the shared ``PythonIntrospector``.
    """

    def __init__(self, introspector: ElementIntrospector | None = None) -> None:
        self._introspector = introspector or DEFAULT_INTROSPECTOR

    def resolve(self, cls: type, tag_kind: type) -> Tag | None:
        """Return the ``tag_kind`` tag applying to ``cls``, or ``None``.

        Raises
        ------
        InvalidArgumentError
            If ``cls`` or ``tag_kind`` is ``None``.
        """
        require(cls, "cls")
        require(tag_kind, "tag_kind")
        return self._find(cls, tag_kind, set())

    def _find(self, cls: type, tag_kind: type, visited: set[int]) -> Tag | None:
        if id(cls) in visited:
            logger.debug("Skipping %r: already visited for %r", cls, tag_kind)
            return None
        visited.add(id(cls))
        introspector = self._introspector

        present = introspector.present_tags(cls)
        tag = first_of_kind(present, tag_kind, introspector)
        if tag is not None:
            return tag

        for iface in introspector.interfaces(cls):
            tag = self._find(iface, tag_kind, visited)
            if tag is not None:
                return tag

        if not introspector.is_tag_kind(cls):
            for candidate in present:
                tag = self._find(introspector.tag_kind(candidate), tag_kind, visited)
                if tag is not None:
                    return tag

        superclass = introspector.superclass(cls)
        if superclass is None or superclass is introspector.root_type():
            return None
        return self._find(superclass, tag_kind, visited)
