from aclsync.acl.entry import (
    ABSENT,
    EntrySet,
    InvalidSyntax,
    PermissionEntry,
    PrincipalType,
    Scope,
    format_entries,
    parse,
    parse_entries,
    sorted_entries,
)
from aclsync.acl.resource import AclResource, ActionMode, InvalidPath, MissingPermission

__all__ = [
    "ABSENT",
    "EntrySet",
    "InvalidSyntax",
    "PermissionEntry",
    "PrincipalType",
    "Scope",
    "format_entries",
    "parse",
    "parse_entries",
    "sorted_entries",
    "AclResource",
    "ActionMode",
    "InvalidPath",
    "MissingPermission",
]
