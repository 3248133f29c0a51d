from aclsync.providers.base import (
    AclProvider,
    ApplyError,
    ProviderCapabilities,
    ProviderError,
    ReadError,
)
from aclsync.providers.posixacl import PosixAclProvider

__all__ = [
    "AclProvider",
    "ApplyError",
    "ProviderCapabilities",
    "ProviderError",
    "ReadError",
    "PosixAclProvider",
]
