from dataclasses import replace
from typing import Iterable

from aclsync.acl.entry import PermissionEntry, PrincipalType, Scope, sorted_entries

_PURGE_TYPES = (PrincipalType.user, PrincipalType.group, PrincipalType.other)


def strip(entries: Iterable[PermissionEntry]) -> tuple[PermissionEntry, ...]:
    """Remove permission bits from each entry, eg:
    user:root:rwx
      becomes
    user:root:

    Access-scope base entries (user::, group::, mask::, other::) always exist on a file, so they
    are left out of the result entirely.
    """
    stripped = [
        entry if entry.absent else replace(entry, bits=None) for entry in entries if not _is_access_base(entry)
    ]
    return tuple(sorted_entries(stripped))


def identity(entry: PermissionEntry) -> str:
    """The principal clause of an entry without the trailing separator, as setfacl -x expects it"""
    return str(replace(entry, bits=None)).removesuffix(':')


def is_purge_compatible(entry: PermissionEntry) -> bool:
    return (
        not entry.absent
        and entry.scope == Scope.access
        and entry.principal_type in _PURGE_TYPES
        and entry.principal_id == ''
        and entry.bits is not None
    )


def _is_access_base(entry: PermissionEntry) -> bool:
    return not entry.absent and entry.scope == Scope.access and entry.is_base
