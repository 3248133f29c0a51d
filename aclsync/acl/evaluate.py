from typing import Iterable

from aclsync.acl.entry import PermissionEntry, sorted_entries
from aclsync.acl.normalize import is_purge_compatible, strip
from aclsync.acl.resource import ActionMode
from aclsync.providers.base import ProviderCapabilities


def exact_insync(current: Iterable[PermissionEntry], desired: Iterable[PermissionEntry]) -> bool:
    return sorted_entries(current) == sorted_entries(desired)


def set_insync(
    current: Iterable[PermissionEntry], desired: Iterable[PermissionEntry], capabilities: ProviderCapabilities
) -> bool:
    current, desired = set(current), set(desired)
    if exact_insync(current, desired):
        return True
    return capabilities.additive_check and desired <= current


def unset_insync(current: Iterable[PermissionEntry], desired: Iterable[PermissionEntry]) -> bool:
    stripped_current = strip(current)
    stripped_desired = strip(desired)
    remaining = sorted_entries(set(stripped_desired) - set(stripped_current))
    return remaining == list(stripped_desired)


def purge_insync(current: Iterable[PermissionEntry]) -> bool:
    # If anything other than the mode bits are set, we're not in sync
    return all(is_purge_compatible(entry) for entry in current)


def insync(
    action: ActionMode,
    current: Iterable[PermissionEntry],
    desired: Iterable[PermissionEntry],
    capabilities: ProviderCapabilities | None = None,
) -> bool:
    capabilities = capabilities or ProviderCapabilities()
    match action:
        case ActionMode.purge:
            return purge_insync(current)
        case ActionMode.unset:
            return unset_insync(current, desired)
        case ActionMode.exact:
            return exact_insync(current, desired)
        case ActionMode.set:
            return set_insync(current, desired, capabilities)
        case _:
            raise ValueError(f"Unknown action: {action}")
