from typing import Callable

from aclsync.api.plugin import AclSyncPlugin
from aclsync.api.store import Store

Entrypoint = Callable[[Store], AclSyncPlugin]
