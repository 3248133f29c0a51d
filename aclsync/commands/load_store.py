from importlib.metadata import entry_points
from pathlib import Path

from aclsync.api.entrypoint import Entrypoint
from aclsync.api.state import State
from aclsync.api.store import Store
from aclsync.commands.load_config import load_config


def load_store(config_path: Path | None = None, verbose: bool = False) -> Store:
    state = State(config=load_config(config_path), verbose=verbose)
    store = Store(state)
    for entry_point in entry_points().select(group='aclsync.plugin'):
        fn: Entrypoint = entry_point.load()
        plugin = fn(store)
        store.add_plugin(plugin)
    return store
