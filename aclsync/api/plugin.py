from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from aclsync.acl.entry import EntrySet
from aclsync.acl.resource import ActionMode


@dataclass
class Event:
    pass


@dataclass
class EvaluatedEvent(Event):
    path: Path
    action: ActionMode
    in_sync: bool
    current: EntrySet
    desired: EntrySet


@dataclass
class AppliedEvent(Event):
    path: Path
    action: ActionMode
    recursive: bool


@dataclass
class FailedEvent(Event):
    path: Path
    error: Exception


class AclSyncPlugin(ABC):
    @abstractmethod
    def handle(self, event: Event) -> None:  # pragma: no cover
        pass
