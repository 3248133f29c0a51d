from aclsync.api.entrypoint import Entrypoint
from aclsync.api.plugin import AclSyncPlugin, AppliedEvent, EvaluatedEvent, Event, FailedEvent
from aclsync.api.state import State
from aclsync.api.store import Store

__all__ = [
    "Entrypoint",
    "AclSyncPlugin",
    "AppliedEvent",
    "EvaluatedEvent",
    "Event",
    "FailedEvent",
    "State",
    "Store",
]
