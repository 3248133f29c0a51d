import os
from itertools import chain
from pathlib import Path
from typing import Iterable

from platformdirs import PlatformDirs

from aclsync.config import Config


def get_config_paths() -> list[Path]:
    dirs = PlatformDirs("aclsync", multipath=True)
    search_paths: Iterable[Path] = chain(
        reversed([Path(p) for p in dirs.site_config_dir.split(os.pathsep)]),
        reversed([Path(p) for p in dirs.user_config_dir.split(os.pathsep)]),
    )
    config_paths: list[Path] = []
    for path in search_paths:
        config_paths.extend([Path(path) / "config.toml", Path(path) / "aclsync.d" / "config.toml"])
    return config_paths


def load_config(path: Path | None = None) -> Config:
    if path is not None:
        try:
            return Config.from_file(path)
        except FileNotFoundError:
            raise ValueError(f"Config file not found: {path}")

    config: Config | None = None
    for config_path in get_config_paths():
        config = _merge(config, _try_load_config(config_path))
    if config is None:
        raise ValueError(f"No config.toml file found. Searched: {', '.join(str(p) for p in get_config_paths())}")
    return config


def _try_load_config(path: Path) -> Config | None:
    try:
        return Config.from_file(path)
    except FileNotFoundError:
        return None


def _merge(base_config: Config | None, override_config: Config | None) -> Config | None:
    if base_config and override_config:
        return Config(
            acl=base_config.acl + override_config.acl,
            provider=override_config.provider,
        )
    return override_config or base_config
