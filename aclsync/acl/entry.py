import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable


class InvalidSyntax(ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"{raw} is not valid acl permission")
        self.raw = raw


class Scope(StrEnum):
    access = 'access'
    default = 'default'


class PrincipalType(StrEnum):
    user = 'user'
    group = 'group'
    mask = 'mask'
    other = 'other'


_SCOPE_WORDS = {'d': Scope.default, 'default': Scope.default}

_TYPE_WORDS = {
    'u': PrincipalType.user,
    'user': PrincipalType.user,
    'g': PrincipalType.group,
    'group': PrincipalType.group,
    'm': PrincipalType.mask,
    'mask': PrincipalType.mask,
    'o': PrincipalType.other,
    'other': PrincipalType.other,
}

_SYMBOLIC_BITS = re.compile(r'^[-rwxX]+$')
_OCTAL_BITS = re.compile(r'^[0-7]{3,4}$')
_WHITESPACE = re.compile(r'\s')


@dataclass(frozen=True, eq=False)
class PermissionEntry:
    scope: Scope = Scope.access
    principal_type: PrincipalType | None = None
    principal_id: str = ''
    bits: str | None = None
    absent: bool = False

    def __str__(self) -> str:
        if self.absent:
            return 'absent'
        prefix = 'default:' if self.scope == Scope.default else ''
        if self.principal_type is None:
            # Symbolic bits keep the empty principal clause in front of them, e.g. default::rwx
            if self.bits and _SYMBOLIC_BITS.match(self.bits):
                return f"{prefix}:{self.bits}"
            return f"{prefix}{self.bits or ''}"
        return f"{prefix}{self.principal_type}:{self.principal_id}:{self.bits or ''}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionEntry):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __lt__(self, other: 'PermissionEntry') -> bool:
        return str(self) < str(other)

    @property
    def is_base(self) -> bool:
        """True for the owning user/group, mask and other entries, which carry no qualifier"""
        return self.principal_type is not None and self.principal_id == ''


ABSENT = PermissionEntry(absent=True)

EntrySet = frozenset[PermissionEntry]


def parse(raw: str) -> PermissionEntry:
    tokens = raw.split(':')

    scope = Scope.access
    if len(tokens) > 1 and tokens[0] in _SCOPE_WORDS:
        scope = _SCOPE_WORDS[tokens[0]]
        tokens = tokens[1:]

    if len(tokens) == 1:
        # Bare mode, e.g. 755 or default:0750
        if not _OCTAL_BITS.match(tokens[0]):
            raise InvalidSyntax(raw)
        return PermissionEntry(scope=scope, bits=tokens[0])

    if len(tokens) not in (2, 3):
        raise InvalidSyntax(raw)

    if len(tokens) == 2 and tokens[0] == '':
        # No principal clause, e.g. :rwx or default::rwx
        if not (_SYMBOLIC_BITS.match(tokens[1]) or _OCTAL_BITS.match(tokens[1])):
            raise InvalidSyntax(raw)
        return PermissionEntry(scope=scope, bits=tokens[1])

    principal_type = _TYPE_WORDS.get(tokens[0])
    if principal_type is None:
        raise InvalidSyntax(raw)

    principal_id = tokens[1] if len(tokens) == 3 else ''
    if principal_id and principal_type in (PrincipalType.mask, PrincipalType.other):
        raise InvalidSyntax(raw)
    if _WHITESPACE.search(principal_id):
        raise InvalidSyntax(raw)

    bits = tokens[-1]
    if not (_SYMBOLIC_BITS.match(bits) or _OCTAL_BITS.match(bits)):
        raise InvalidSyntax(raw)

    return PermissionEntry(scope=scope, principal_type=principal_type, principal_id=principal_id, bits=bits)


def parse_entries(raws: Iterable[str]) -> EntrySet:
    return frozenset(parse(raw) for raw in raws)


def sorted_entries(entries: Iterable[PermissionEntry]) -> list[PermissionEntry]:
    return sorted(set(entries))


def format_entries(entries: Iterable[PermissionEntry]) -> str:
    entries = sorted_entries(entries)
    if ABSENT in entries:
        return str(ABSENT)
    return ",".join(str(e) for e in entries)
