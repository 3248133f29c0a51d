from pathlib import Path
from typing import Callable, Iterable

import pytest

from aclsync.acl.entry import EntrySet, parse_entries
from aclsync.acl.resource import ActionMode
from aclsync.api import State, Store
from aclsync.config import Config
from aclsync.providers.base import AclProvider, ProviderCapabilities


class FakeProvider(AclProvider):
    def __init__(self, current: Iterable[str] = (), additive_check: bool = False) -> None:
        self.capabilities = ProviderCapabilities(additive_check=additive_check)
        self.current: EntrySet = parse_entries(current)
        self.reads: list[tuple[Path, bool]] = []
        self.applied: list[tuple[Path, bool, ActionMode, EntrySet]] = []

    def current_entries(self, path: Path, recursive: bool) -> EntrySet:
        self.reads.append((path, recursive))
        return self.current

    def apply(self, path: Path, recursive: bool, action: ActionMode, desired: EntrySet) -> None:
        self.applied.append((path, recursive, action, desired))


ProviderFactory = Callable[..., FakeProvider]


@pytest.fixture
def make_provider() -> ProviderFactory:
    return FakeProvider


@pytest.fixture
def config() -> Config:
    toml = """
[provider]
additive_check = false

[[acl]]
path = "/var/www/html"
action = "exact"
recursive = true
permission = ["user::rwx", "group::r-x", "other::r--"]

[[acl]]
path = "/srv/shared"
permission = ["user:alice:rwx"]
"""
    return Config.from_toml(toml)


@pytest.fixture
def store(config: Config) -> Store:
    return Store(State(config=config))
