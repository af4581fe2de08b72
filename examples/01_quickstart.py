#!/usr/bin/env python3
"""Example: Quickstart — metatag

Minimal working example: declare tag kinds, tag a small repository
hierarchy, and resolve tags on classes and methods.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install metatag
"""
from __future__ import annotations

from dataclasses import dataclass

import metatag
from metatag import Inherited, MethodRef, Tag, interface


@Inherited()
@dataclass(frozen=True)
class Service(Tag):
    value: str = ""


@dataclass(frozen=True)
class Transactional(Tag):
    read_only: bool = False
    timeout: int = 30


@Transactional(read_only=True)
@dataclass(frozen=True)
class ReadOnly(Tag):
    pass


@interface
class Repository:
    @Transactional(timeout=5)
    def save(self, entity): ...


@Service("users")
class UserRepository(Repository):
    def save(self, entity):
        return entity

    @ReadOnly()
    def count(self):
        return 0


class CachedUserRepository(UserRepository):
    def save(self, entity):
        return entity


def main() -> None:
    print(f"metatag version: {metatag.__version__}")

    # Step 1: Class tags, including inherited ones
    service = metatag.resolve_on_type(CachedUserRepository, Service)
    declared_on = metatag.find_declaring_class(Service, CachedUserRepository)
    print(f"Service tag: {service} (declared on {declared_on.__name__})")
    print(f"Inherited: {metatag.is_inherited(Service, CachedUserRepository)}")

    # Step 2: Method tags found through the interface
    save = MethodRef.of(CachedUserRepository, "save")
    print(f"save(): {metatag.resolve_on_method(save, Transactional)}")

    # Step 3: Method tags found through a meta-tag
    count = MethodRef.of(CachedUserRepository, "count")
    print(f"count(): {metatag.resolve_on_method(count, Transactional)}")

    # Step 4: Attribute helpers
    print(f"Default timeout: {metatag.get_default_value(Transactional, 'timeout')}")


if __name__ == "__main__":
    main()
