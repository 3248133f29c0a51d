import tempfile
from pathlib import Path

import pytest
from msgspec import DecodeError, ValidationError

from aclsync.acl.entry import InvalidSyntax, parse_entries
from aclsync.acl.resource import AclResource, ActionMode, InvalidPath, MissingPermission
from aclsync.config import AclDeclaration, Config, ProviderSettings


def test_valid_config() -> None:
    toml = """
[provider]
additive_check = false

[[acl]]
path = "/var/www/html"
action = "exact"
recursive = true
permission = ["user::rwx", "default:user:www-data:r-x"]
"""
    actual = Config.from_toml(toml)
    expected = Config(
        acl=(
            AclDeclaration(
                path="/var/www/html",
                permission=("user::rwx", "default:user:www-data:r-x"),
                action=ActionMode.exact,
                recursive=True,
            ),
        ),
        provider=ProviderSettings(additive_check=False),
    )
    assert actual == expected


def test_defaults() -> None:
    toml = """
[[acl]]
path = "/srv"
permission = ["user:alice:rwx"]
"""
    actual = Config.from_toml(toml)
    assert actual.provider == ProviderSettings(additive_check=True)
    assert actual.acl[0].action == ActionMode.set
    assert actual.acl[0].recursive is False


def test_empty_config() -> None:
    assert Config.from_toml("") == Config()


def test_from_file() -> None:
    toml = """
[[acl]]
path = "/srv"
permission = ["user:alice:rwx"]
"""
    with tempfile.NamedTemporaryFile("w") as f:
        f.write(toml)
        f.flush()
        actual = Config.from_file(f.name)
        assert actual == Config(acl=(AclDeclaration(path="/srv", permission=("user:alice:rwx",)),))


def test_resources(config: Config) -> None:
    assert config.resources() == [
        AclResource(
            path=Path("/var/www/html"),
            permission=parse_entries(["user::rwx", "group::r-x", "other::r--"]),
            action=ActionMode.exact,
            recursive=True,
        ),
        AclResource(path=Path("/srv/shared"), permission=parse_entries(["user:alice:rwx"])),
    ]


def test_resources_missing_permission() -> None:
    config = Config.from_toml('[[acl]]\npath = "/srv"\n')
    with pytest.raises(MissingPermission):
        config.resources()


def test_resources_relative_path() -> None:
    config = Config.from_toml('[[acl]]\npath = "srv"\npermission = ["user::rwx"]\n')
    with pytest.raises(InvalidPath):
        config.resources()


def test_resources_invalid_permission() -> None:
    config = Config.from_toml('[[acl]]\npath = "/srv"\npermission = ["user::rwx", "nope"]\n')
    with pytest.raises(InvalidSyntax):
        config.resources()


def test_invalid_action() -> None:
    toml = """
[[acl]]
path = "/srv"
action = "replace"
permission = ["user::rwx"]
"""
    with pytest.raises(ValidationError):
        Config.from_toml(toml)


def test_invalid_types() -> None:
    toml = """
[[acl]]
path = "/srv"
permission = 5
"""
    with pytest.raises(ValidationError):
        Config.from_toml(toml)


def test_missing_path() -> None:
    toml = """
[[acl]]
permission = ["user::rwx"]
"""
    with pytest.raises(ValidationError):
        Config.from_toml(toml)


def test_invalid_toml() -> None:
    toml = """{]"""
    with pytest.raises(DecodeError):
        Config.from_toml(toml)
