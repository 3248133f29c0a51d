from dataclasses import dataclass, replace
from typing import TypedDict, Unpack

from aclsync.config import Config


class UpdateArgs(TypedDict, total=False):
    config: Config
    verbose: bool


@dataclass(frozen=True)
class State:
    config: Config
    verbose: bool = False

    def update(self, **kwargs: Unpack[UpdateArgs]) -> 'State':
        return replace(self, **kwargs)
