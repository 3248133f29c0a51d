import os
from dataclasses import dataclass, field
from typing import Tuple

import msgspec

from aclsync.acl.resource import AclResource, ActionMode


@dataclass
class AclDeclaration:
    path: str
    permission: Tuple[str, ...] = ()
    action: ActionMode = ActionMode.set
    recursive: bool = False

    def to_resource(self) -> AclResource:
        return AclResource.from_declaration(
            self.path, self.permission, action=self.action, recursive=self.recursive
        )


@dataclass
class ProviderSettings:
    additive_check: bool = True


@dataclass
class Config:
    acl: Tuple[AclDeclaration, ...] = ()
    provider: ProviderSettings = field(default_factory=ProviderSettings)

    @classmethod
    def from_file(cls, path: os.PathLike | str) -> "Config":
        with open(path) as f:
            return cls.from_toml(f.read())

    @classmethod
    def from_toml(cls, toml: str) -> "Config":
        return msgspec.toml.decode(toml, type=cls)

    def resources(self) -> list[AclResource]:
        # Validation is fail-fast: the first invalid declaration stops the whole load
        return [declaration.to_resource() for declaration in self.acl]
