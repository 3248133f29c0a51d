import click

from aclsync.acl.entry import format_entries
from aclsync.api import AclSyncPlugin, AppliedEvent, EvaluatedEvent, FailedEvent, Store
from aclsync.api.plugin import Event


class TracePlugin(AclSyncPlugin):
    def __init__(self, store: Store) -> None:
        self.store = store

    def handle(self, event: Event) -> None:
        if not self.store.state.verbose:
            return
        match event:
            case EvaluatedEvent():
                click.echo(
                    f"{event.path}: {event.action} in_sync={event.in_sync} "
                    f"current={format_entries(event.current)} desired={format_entries(event.desired)}",
                    err=True,
                )
            case AppliedEvent():
                click.echo(f"{event.path}: applied {event.action}{' recursively' if event.recursive else ''}", err=True)
            case FailedEvent():
                click.echo(f"{event.path}: {event.error}", err=True)


def entrypoint(store: Store) -> TracePlugin:
    return TracePlugin(store)
