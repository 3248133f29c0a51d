from dataclasses import dataclass, replace
from enum import StrEnum
from pathlib import Path
from typing import Iterable, TypedDict, Unpack

from aclsync.acl.entry import EntrySet, parse_entries


class ActionMode(StrEnum):
    set = 'set'
    unset = 'unset'
    exact = 'exact'
    purge = 'purge'


class MissingPermission(ValueError):
    pass


class InvalidPath(ValueError):
    pass


class UpdateArgs(TypedDict, total=False):
    action: ActionMode
    recursive: bool
    permission: EntrySet


@dataclass(frozen=True)
class AclResource:
    path: Path
    permission: EntrySet
    action: ActionMode = ActionMode.set
    recursive: bool = False

    def __post_init__(self) -> None:
        if not self.path.is_absolute():
            raise InvalidPath(f"Path must be absolute: {self.path}")
        if not self.permission:
            raise MissingPermission(f"permission is a required property ({self.path})")

    @classmethod
    def from_declaration(
        cls,
        path: str | Path,
        permission: Iterable[str],
        action: ActionMode | str = ActionMode.set,
        recursive: bool = False,
    ) -> "AclResource":
        # Check the path and the permission list before parsing any entry
        path = Path(path)
        permission = list(permission)
        if not path.is_absolute():
            raise InvalidPath(f"Path must be absolute: {path}")
        if not permission:
            raise MissingPermission(f"permission is a required property ({path})")
        return cls(
            path=path,
            permission=parse_entries(permission),
            action=ActionMode(action),
            recursive=recursive,
        )

    def update(self, **kwargs: Unpack[UpdateArgs]) -> 'AclResource':
        return replace(self, **kwargs)
