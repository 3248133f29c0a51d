from aclsync.api.plugin import AclSyncPlugin, Event
from aclsync.api.state import State


class Store:
    _state: State
    plugins: set[AclSyncPlugin]

    def __init__(self, state: State) -> None:
        self._state = state
        self.plugins = set()

    def add_plugin(self, plugin: AclSyncPlugin) -> None:
        self.plugins.add(plugin)

    def dispatch(self, event: Event) -> None:
        for plugin in self.plugins:
            plugin.handle(event)

    @property
    def state(self) -> State:
        return self._state

    @state.setter
    def state(self, state: State) -> None:
        self._state = state
