from enum import StrEnum
from pathlib import Path

from aclsync.acl.evaluate import insync
from aclsync.acl.resource import AclResource
from aclsync.api import AppliedEvent, EvaluatedEvent, FailedEvent, Store
from aclsync.providers.base import AclProvider, ProviderError


class Outcome(StrEnum):
    no_change = 'no_change'
    changed = 'changed'
    dry_run = 'dry_run'


def check(resource: AclResource, provider: AclProvider, *, store: Store | None = None) -> bool:
    current = provider.current_entries(resource.path, resource.recursive)
    in_sync = insync(resource.action, current, resource.permission, provider.capabilities)
    if store is not None:
        store.dispatch(
            EvaluatedEvent(
                path=resource.path,
                action=resource.action,
                in_sync=in_sync,
                current=current,
                desired=resource.permission,
            )
        )
    return in_sync


def reconcile(
    resource: AclResource, provider: AclProvider, *, store: Store | None = None, dry_run: bool = False
) -> Outcome:
    if check(resource, provider, store=store):
        return Outcome.no_change
    if dry_run:
        return Outcome.dry_run

    provider.apply(resource.path, resource.recursive, resource.action, resource.permission)
    if store is not None:
        store.dispatch(AppliedEvent(path=resource.path, action=resource.action, recursive=resource.recursive))
    return Outcome.changed


def reconcile_all(store: Store, provider: AclProvider, *, dry_run: bool) -> dict[Path, Outcome | ProviderError]:
    """Reconciles every configured resource.

    A provider failure only affects its own path: it is recorded in the result and the
    remaining resources are still processed.
    """
    results: dict[Path, Outcome | ProviderError] = {}
    for resource in store.state.config.resources():
        try:
            results[resource.path] = reconcile(resource, provider, store=store, dry_run=dry_run)
        except ProviderError as e:
            store.dispatch(FailedEvent(path=resource.path, error=e))
            results[resource.path] = e
    return results
