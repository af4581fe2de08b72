"""Shared tag kinds and class hierarchy for the unit tests and CLI tests.

Hierarchy::

    Repository (interface)
        ^
    BaseRepository            Auditable (interface)
        ^                         ^
    UserRepository ---------------'
        ^
    CachedUserRepository
"""
from __future__ import annotations

from dataclasses import dataclass, field

from metatag import Inherited, Tag, interface


@Inherited()
@dataclass(frozen=True)
class Service(Tag):
    value: str = ""


@dataclass(frozen=True)
class Transactional(Tag):
    value: str = "default"
    read_only: bool = False
    timeout: int = 30


@dataclass(frozen=True)
class Audited(Tag):
    level: str = "basic"
    labels: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Marker(Tag):
    """Not inheritance-eligible."""


@Transactional("read-only", read_only=True)
@dataclass(frozen=True)
class ReadOnly(Tag):
    """Meta-tagged with Transactional."""


@dataclass(frozen=True)
class Required(Tag):
    name: str


@interface
class Repository:
    @Transactional("repo")
    def find(self, key): ...

    def save(self, entity): ...


@interface
class Auditable:
    @Audited(level="full")
    def save(self, entity): ...


@interface
class Untagged:
    def find(self, key): ...


@Service("base")
@Marker()
class BaseRepository(Repository):
    def find(self, key):
        return None

    @Transactional("base-save")
    def save(self, entity):
        return entity


class UserRepository(BaseRepository, Auditable):
    def find(self, key):
        return key

    def save(self, entity):
        return entity

    @ReadOnly()
    def count(self):
        return 0


class CachedUserRepository(UserRepository):
    def find(self, key):
        return key

    def save(self, entity):
        return entity


class PlainService(Untagged):
    def find(self, key):
        return key

    def describe(self):
        return "plain"
