"""Parser for ``lxc.mount.entry`` values.

A mount entry uses the classic fstab shape::

    source  destination  type  options  [dump  pass]

Fields are separated by any run of spaces or tabs.  Only the first four
fields are used; ``options`` is taken verbatim from the fourth field.
"""
from __future__ import annotations

from dataclasses import dataclass

from lxcnative.errors import FstabParseError

_FIELD_COUNT = 4


@dataclass(frozen=True, slots=True)
class FstabLine:
    """The four mandatory fields of a mount entry."""

    source: str
    destination: str
    fs_type: str
    options: str

    @property
    def option_list(self) -> list[str]:
        """Return the comma-separated options as a list."""
        return self.options.split(",")


def split_fields(value: str) -> list[str]:
    """Split a mount entry on blanks, dropping empty fields."""
    return [part for part in value.replace("\t", " ").split(" ") if part]


def parse_fstab_line(value: str | None) -> FstabLine:
    """Parse one ``lxc.mount.entry`` value.

    Raises
    ------
    FstabParseError
        If the value is missing or has fewer than four fields.
    """
    if value is None:
        raise FstabParseError("missing lxc.mount.entry value", key="lxc.mount.entry")

    parts = split_fields(value)
    if len(parts) < _FIELD_COUNT:
        raise FstabParseError(
            f"invalid lxc.mount.entry: '{value}', expected "
            "'source destination type options'",
            key="lxc.mount.entry",
            value=value,
        )

    source, destination, fs_type, options = parts[:_FIELD_COUNT]
    return FstabLine(source=source, destination=destination, fs_type=fs_type, options=options)
