import subprocess
from pathlib import Path

from aclsync.acl.entry import ABSENT, EntrySet, InvalidSyntax, PrincipalType, parse, sorted_entries
from aclsync.acl.normalize import identity, strip
from aclsync.acl.resource import ActionMode
from aclsync.providers.base import AclProvider, ApplyError, ProviderCapabilities, ReadError


class PosixAclProvider(AclProvider):
    def __init__(self, additive_check: bool = True) -> None:
        self.capabilities = ProviderCapabilities(additive_check=additive_check)

    def current_entries(self, path: Path, recursive: bool) -> EntrySet:
        """Reads the ACL of the named path only, recursive or not"""
        # Children of a recursive resource may legitimately differ (plain files never carry default entries)
        cmd = ['getfacl', '--absolute-names', '--omit-header', '--no-effective', str(path)]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            raise ReadError("getfacl is not available") from e
        except subprocess.CalledProcessError as e:
            raise ReadError(f"Could not read the ACL of {path}", stderr=e.stderr) from e

        lines = [line.strip() for line in result.stdout.splitlines()]
        lines = [line for line in lines if line and not line.startswith('#')]
        if not lines:
            return frozenset([ABSENT])
        try:
            return frozenset(parse(line) for line in lines)
        except InvalidSyntax as e:
            raise ReadError(f"Unexpected getfacl output for {path}: {e.raw}") from e

    def apply(self, path: Path, recursive: bool, action: ActionMode, desired: EntrySet) -> None:
        cmd = ['setfacl']
        if recursive:
            cmd.append('-R')
        match action:
            case ActionMode.exact:
                cmd.extend(['--set', _join(desired)])
            case ActionMode.set:
                cmd.extend(['-m', _join(desired)])
            case ActionMode.unset:
                # Same identities the unset comparison looks at, so an out of sync resource always has one
                removable = strip(desired)
                if not removable:
                    return
                # A default ACL can't lose its base entries one at a time, only as a whole
                if any(e.is_base and e.principal_type != PrincipalType.mask for e in removable):
                    cmd.append('-k')
                named = [
                    e
                    for e in removable
                    if e.principal_type is not None and not (e.is_base and e.principal_type != PrincipalType.mask)
                ]
                if named:
                    cmd.extend(['-x', ",".join(identity(e) for e in named)])
            case ActionMode.purge:
                cmd.append('-b')
        cmd.append(str(path))

        try:
            subprocess.run(cmd, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            raise ApplyError("setfacl is not available") from e
        except subprocess.CalledProcessError as e:
            raise ApplyError(f"Calling {' '.join(cmd)} failed", stderr=e.stderr) from e


def _join(entries: EntrySet) -> str:
    return ",".join(str(e) for e in sorted_entries(entries))
