from aclsync.commands.load_config import get_config_paths, load_config
from aclsync.commands.load_store import load_store
from aclsync.commands.reconcile import Outcome, check, reconcile, reconcile_all
