"""LXC configuration reader: converts raw text into an ordered property store.

The reader is a single-pass character scanner over the LXC dialect of the
``name = value`` configuration grammar:

    - blank lines are ignored
    - ``#`` starts a comment line (only at the beginning of a line,
      optionally after blanks)
    - names start with a letter and continue with letters, digits,
      ``_`` or ``.`` (e.g. ``lxc.mount.entry``)
    - the value is the raw rest of the line with trailing blanks
      removed; there is no quoting and no trailing comment

Keys may repeat.  The resulting ``PropertyStore`` keeps every entry in
file order so that order-sensitive keys (mount entries, network blocks)
can be walked exactly as written.
"""
from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from lxcnative.errors import ConfSyntaxError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_NAME_START: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]")
_NAME_CONT: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_.]")
_BLANKS: Final[frozenset[str]] = frozenset({" ", "\t"})
_EOL: Final[frozenset[str]] = frozenset({"\n", "\r"})


@dataclass(frozen=True, slots=True)
class Property:
    """A single ``name = value`` entry.

    Parameters
    ----------
    key:
        The property name, e.g. ``lxc.rootfs``.
    value:
        The raw value, or ``None`` when the entry carries no value.
    line:
        1-based line number of the entry in the source text.
    """

    key: str
    value: str | None
    line: int = 0


class PropertyStore:
    """Ordered, multi-valued view of a parsed configuration.

    Parameters
    ----------
    entries:
        Properties in source order.  Keys may repeat.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: list[Property]) -> None:
        self._entries: tuple[Property, ...] = tuple(entries)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self._entries)

    def lookup(self, key: str) -> Property | None:
        """Return the first entry named ``key``, or ``None``."""
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def get(self, key: str) -> str | None:
        """Return the value of the first entry named ``key``, or ``None``."""
        entry = self.lookup(key)
        return entry.value if entry is not None else None

    def get_all(self, key: str) -> list[str | None]:
        """Return the values of every entry named ``key``, in file order."""
        return [entry.value for entry in self._entries if entry.key == key]

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(key, value)`` pairs in file order."""
        for entry in self._entries:
            yield entry.key, entry.value


class ConfReader:
    """Single-pass reader for the LXC configuration dialect.

    Parameters
    ----------
    source:
        The complete configuration text.
    """

    __slots__ = ("_source", "_pos", "_line", "_entries")

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._pos: int = 0
        self._line: int = 1
        self._entries: list[Property] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read(self) -> PropertyStore:
        """Scan the entire source and return the property store.

        Raises
        ------
        ConfSyntaxError
            On a line that is neither blank, a comment, nor an assignment.
        """
        while self._pos < len(self._source):
            self._read_statement()
        return PropertyStore(self._entries)

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _current(self) -> str:
        return self._source[self._pos] if self._pos < len(self._source) else ""

    def _at_eol(self) -> bool:
        return self._pos >= len(self._source) or self._current() in _EOL

    def _skip_blanks(self) -> None:
        while self._current() in _BLANKS:
            self._pos += 1

    def _skip_eol(self) -> None:
        """Consume one line terminator (``\\n``, ``\\r`` or ``\\r\\n``)."""
        ch = self._current()
        if ch == "\r":
            self._pos += 1
            ch = self._current()
        if ch == "\n":
            self._pos += 1
        self._line += 1

    def _skip_to_eol(self) -> None:
        while not self._at_eol():
            self._pos += 1

    def _read_statement(self) -> None:
        """Read one line: blank, comment, or ``name = value``."""
        self._skip_blanks()
        if self._at_eol():
            if self._pos < len(self._source):
                self._skip_eol()
            return

        if self._current() == "#":
            self._skip_to_eol()
            if self._pos < len(self._source):
                self._skip_eol()
            return

        line = self._line
        name = self._read_name()
        self._skip_blanks()
        if self._current() != "=":
            raise ConfSyntaxError("expecting an assignment", line)
        self._pos += 1
        self._skip_blanks()
        value = self._read_value()
        self._entries.append(Property(key=name, value=value, line=line))

        if self._pos < len(self._source):
            self._skip_eol()

    def _read_name(self) -> str:
        if not _NAME_START.match(self._current()):
            raise ConfSyntaxError("expecting a name", self._line)
        start = self._pos
        while self._current() and _NAME_CONT.match(self._current()):
            self._pos += 1
        return self._source[start:self._pos]

    def _read_value(self) -> str:
        # The LXC dialect has no quoting: the value is the rest of the line.
        start = self._pos
        self._skip_to_eol()
        return self._source[start:self._pos].rstrip(" \t")


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def read_properties(source: str) -> PropertyStore:
    """Parse LXC configuration text into a ``PropertyStore``.

    Parameters
    ----------
    source:
        Complete configuration text.

    Returns
    -------
    PropertyStore
        Every entry in file order.

    Raises
    ------
    ConfSyntaxError
        If a line cannot be parsed.

    Example
    -------
    ::

        from lxcnative.conf import read_properties
        store = read_properties("lxc.utsname = c1\\n")
        store.get("lxc.utsname")  # 'c1'
    """
    return ConfReader(source).read()
