from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from aclsync.acl.entry import EntrySet
from aclsync.acl.resource import ActionMode


class ProviderError(Exception):
    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr


class ReadError(ProviderError):
    pass


class ApplyError(ProviderError):
    pass


@dataclass(frozen=True)
class ProviderCapabilities:
    # When set, the set action tolerates current entries beyond the desired ones
    additive_check: bool = False


class AclProvider(ABC):
    capabilities: ProviderCapabilities = ProviderCapabilities()

    @abstractmethod
    def current_entries(self, path: Path, recursive: bool) -> EntrySet:  # pragma: no cover
        pass

    @abstractmethod
    def apply(self, path: Path, recursive: bool, action: ActionMode, desired: EntrySet) -> None:  # pragma: no cover
        pass

    def additive_check_supported(self) -> bool:
        return self.capabilities.additive_check
