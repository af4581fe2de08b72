"""Unit tests for metatag.resolve.type_resolver.TypeResolver."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from metatag.core.errors import InvalidArgumentError
from metatag.introspect import PythonIntrospector
from metatag.resolve import TypeResolver
from metatag.tags.model import Tag, attach, interface

from sample_model import (
    Audited,
    BaseRepository,
    CachedUserRepository,
    Marker,
    PlainService,
    ReadOnly,
    Service,
    Transactional,
    UserRepository,
)


class _EveryClassIsPlain(PythonIntrospector):
    """Treats tag kinds like ordinary classes so their meta-tags are expanded too."""

    def is_tag_kind(self, cls: type) -> bool:
        return False


@pytest.fixture()
def resolver() -> TypeResolver:
    return TypeResolver()


class TestResolve:
    def test_direct_tag(self, resolver: TypeResolver) -> None:
        assert resolver.resolve(BaseRepository, Service) == Service("base")

    def test_inherited_tag_is_present(self, resolver: TypeResolver) -> None:
        assert resolver.resolve(CachedUserRepository, Service) == Service("base")

    def test_non_inheritable_tag_found_on_superclass(self, resolver: TypeResolver) -> None:
        assert resolver.resolve(CachedUserRepository, Marker) == Marker()

    def test_found_on_interface(self, resolver: TypeResolver) -> None:
        @Audited(level="iface")
        @interface
        class Tracked:
            pass

        class Impl(Tracked):
            pass

        assert resolver.resolve(Impl, Audited) == Audited(level="iface")

    def test_found_on_super_interface(self, resolver: TypeResolver) -> None:
        @Audited(level="root")
        @interface
        class Tracked:
            pass

        @interface
        class DeeplyTracked(Tracked):
            pass

        class Impl(DeeplyTracked):
            pass

        assert resolver.resolve(Impl, Audited) == Audited(level="root")

    def test_interface_searched_before_superclass(self, resolver: TypeResolver) -> None:
        @Marker()
        class Parent:
            pass

        @interface
        @Audited(level="iface")
        class Tracked:
            pass

        @Audited(level="parent")
        class Middle(Parent):
            pass

        class Child(Middle, Tracked):
            pass

        assert resolver.resolve(Child, Audited) == Audited(level="iface")

    def test_meta_tag_on_class(self, resolver: TypeResolver) -> None:
        @ReadOnly()
        class Report:
            pass

        assert resolver.resolve(Report, Transactional) == Transactional("read-only", read_only=True)

    def test_meta_search_stops_at_tag_kinds(self, resolver: TypeResolver) -> None:
        @ReadOnly()
        @dataclass(frozen=True)
        class Reporting(Tag):
            pass

        @Reporting()
        class Dashboard:
            pass

        assert resolver.resolve(Dashboard, ReadOnly) == ReadOnly()
        assert resolver.resolve(Dashboard, Transactional) is None

    def test_meta_search_recurses_when_introspector_allows(self) -> None:
        @ReadOnly()
        @dataclass(frozen=True)
        class Reporting(Tag):
            pass

        @Reporting()
        class Dashboard:
            pass

        resolver = TypeResolver(_EveryClassIsPlain())
        assert resolver.resolve(Dashboard, Transactional) == Transactional("read-only", read_only=True)

    def test_tag_kind_does_not_search_meta_tags_of_its_tags(self, resolver: TypeResolver) -> None:
        @ReadOnly()
        @dataclass(frozen=True)
        class Reporting(Tag):
            pass

        assert resolver.resolve(Reporting, ReadOnly) == ReadOnly()
        assert resolver.resolve(Reporting, Transactional) is None

    def test_absent(self, resolver: TypeResolver) -> None:
        assert resolver.resolve(PlainService, Service) is None
        assert resolver.resolve(UserRepository, Transactional) is None

    def test_root_type_itself(self, resolver: TypeResolver) -> None:
        assert resolver.resolve(object, Marker) is None


class TestCycles:
    def test_mutually_meta_tagged_kinds_terminate(self) -> None:
        @dataclass(frozen=True)
        class Ping(Tag):
            pass

        @dataclass(frozen=True)
        class Pong(Tag):
            pass

        attach(Ping, Pong())
        attach(Pong, Ping())

        @Ping()
        class Looped:
            pass

        resolver = TypeResolver(_EveryClassIsPlain())
        assert resolver.resolve(Looped, Marker) is None
        assert resolver.resolve(Looped, Pong) == Pong()


class TestErrors:
    def test_none_class(self, resolver: TypeResolver) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            resolver.resolve(None, Service)  # type: ignore[arg-type]
        assert info.value.argument == "cls"

    def test_none_kind(self, resolver: TypeResolver) -> None:
        with pytest.raises(InvalidArgumentError):
            resolver.resolve(BaseRepository, None)  # type: ignore[arg-type]
