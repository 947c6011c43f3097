from __future__ import annotations
import re
import sys

from iota.errors import IotaInvalidSymbol

# A symbol name is one atom token: no whitespace and no parentheses.
_NAME_RE = re.compile(r"[^\s()]+\Z")


class Symbol:
    """A name in Iota source, compared by its text."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not _NAME_RE.match(name):
            raise IotaInvalidSymbol(f"{name!r} is not a valid symbol name")
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
