"""Resolution reports and their JSON / YAML serialization.

A :class:`ResolutionReport` captures what the resolvers say about one
target (a class or a method) for a list of tag kinds. The CLI renders it as
a table or dumps it through :class:`ReportSerializer`.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import yaml

from metatag.resolve import DeclarationLocator, MethodResolver, TypeResolver
from metatag.tags.attributes import tag_attributes
from metatag.tags.model import MethodRef, Tag


def _qualname(obj: Any) -> str:
    module = getattr(obj, "__module__", None)
    name = getattr(obj, "__qualname__", None) or str(obj)
    return f"{module}:{name}" if module else name


@dataclass(frozen=True)
class KindResult:
    """What the resolvers report for a single tag kind.

    Parameters
    ----------
    kind:
        The tag kind that was looked up.
    tag:
        The resolved tag, or ``None``.
    declaring_class:
        Class target only: nearest class locally declaring the kind.
    locally_declared:
        Class target only: whether the target declares the kind itself.
    inherited:
        Class target only: whether the kind is inherited by the target.
    """

    kind: type
    tag: Tag | None
    declaring_class: type | None = None
    locally_declared: bool | None = None
    inherited: bool | None = None


@dataclass(frozen=True)
class ResolutionReport:
    """Resolution results for one target across several tag kinds."""

    target: type | MethodRef
    results: tuple[KindResult, ...]
    any_of_declaring_class: type | None = None
    kinds: tuple[type, ...] = field(default=())

    @property
    def is_method(self) -> bool:
        return isinstance(self.target, MethodRef)

    @property
    def target_name(self) -> str:
        if isinstance(self.target, MethodRef):
            return f"{_qualname(self.target.declaring_type)}.{self.target.name}"
        return _qualname(self.target)


def build_report(
    target: type | MethodRef,
    kinds: tuple[type, ...],
    method_resolver: MethodResolver | None = None,
    type_resolver: TypeResolver | None = None,
    locator: DeclarationLocator | None = None,
) -> ResolutionReport:
    """Run every applicable resolver on ``target`` for each of ``kinds``."""
    if isinstance(target, MethodRef):
        method_resolver = method_resolver or MethodResolver()
        results = tuple(
            KindResult(kind=kind, tag=method_resolver.resolve(target, kind))
            for kind in kinds
        )
        return ResolutionReport(target=target, results=results, kinds=kinds)

    type_resolver = type_resolver or TypeResolver()
    locator = locator or DeclarationLocator()
    results = tuple(
        KindResult(
            kind=kind,
            tag=type_resolver.resolve(target, kind),
            declaring_class=locator.find_declaring_class(kind, target),
            locally_declared=locator.is_locally_declared(kind, target),
            inherited=locator.is_inherited(kind, target),
        )
        for kind in kinds
    )
    any_of = locator.find_declaring_class_for_any_of(kinds, target) if len(kinds) > 1 else None
    return ResolutionReport(
        target=target, results=results, any_of_declaring_class=any_of, kinds=kinds
    )


class ReportSerializer:
    """Convert a ``ResolutionReport`` to plain data, JSON or YAML.

    Attribute values that are not JSON/YAML scalars or containers are
    rendered with ``repr``.
    """

    def to_dict(self, report: ResolutionReport) -> dict[str, object]:
        """Return a plain-data representation of ``report``."""
        data: dict[str, object] = {
            "target": report.target_name,
            "kind": "method" if report.is_method else "class",
            "results": [self._result_to_dict(r, report.is_method) for r in report.results],
        }
        if len(report.kinds) > 1 and not report.is_method:
            data["any_of_declaring_class"] = self._class_name(report.any_of_declaring_class)
        return data

    def _result_to_dict(self, result: KindResult, is_method: bool) -> dict[str, object]:
        data: dict[str, object] = {
            "tag_kind": _qualname(result.kind),
            "tag": self._tag_to_dict(result.tag),
        }
        if not is_method:
            data["declaring_class"] = self._class_name(result.declaring_class)
            data["locally_declared"] = result.locally_declared
            data["inherited"] = result.inherited
        return data

    def _tag_to_dict(self, tag: Tag | None) -> dict[str, object] | None:
        if tag is None:
            return None
        return {
            "kind": _qualname(type(tag)),
            "attributes": {k: self._plain(v) for k, v in tag_attributes(tag).items()},
        }

    def _class_name(self, cls: type | None) -> str | None:
        return None if cls is None else _qualname(cls)

    def _plain(self, value: Any) -> object:
        if value is None or isinstance(value, (str, int, float, bool)):
            return value
        if isinstance(value, (list, tuple)):
            return [self._plain(v) for v in value]
        if isinstance(value, dict):
            return {str(k): self._plain(v) for k, v in value.items()}
        if isinstance(value, type):
            return _qualname(value)
        return repr(value)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, report: ResolutionReport, indent: int = 2) -> str:
        """Serialize ``report`` to a JSON string."""
        return json.dumps(self.to_dict(report), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, report: ResolutionReport) -> str:
        """Serialize ``report`` to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(report), default_flow_style=False, allow_unicode=True, sort_keys=False
        )
