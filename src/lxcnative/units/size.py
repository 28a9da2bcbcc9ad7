"""Size parsing: ``"<integer><unit>"`` strings to byte counts.

Suffix rules
------------
=================  ==========================
Suffix             Multiplier
=================  ==========================
*(none)*           ``scale`` (1 for sizes)
``b`` ``byte(s)``  1
``k`` ``KiB``      1024
``KB``             1000
``m`` ``MiB``      1024 ** 2
``MB``             1000 ** 2
...                up to ``e`` / ``EiB`` / ``EB``
=================  ==========================

Suffixes are case-insensitive.  ``%`` is rejected outright: a relative
size cannot be turned into a byte count without knowing the host.
"""
from __future__ import annotations

import re
from typing import Final

from lxcnative.errors import RelativeSizeError, SizeConversionError

ULLONG_MAX: Final[int] = 2**64 - 1

_SIZE_RE: Final[re.Pattern[str]] = re.compile(r"([0-9]+)(.*)", re.DOTALL)
_BYTE_SUFFIXES: Final[frozenset[str]] = frozenset({"b", "byte", "bytes"})
_POWERS: Final[dict[str, int]] = {"k": 1, "m": 2, "g": 3, "t": 4, "p": 5, "e": 6}


def scale_integer(
    value: int,
    suffix: str,
    scale: int = 1,
    limit: int = ULLONG_MAX,
) -> int:
    """Multiply ``value`` by the factor named by ``suffix``.

    Parameters
    ----------
    value:
        The unscaled, non-negative number.
    suffix:
        Unit suffix; empty means ``scale``.
    scale:
        Multiplier used when ``suffix`` is empty.
    limit:
        Largest acceptable result.

    Returns
    -------
    int
        The scaled value.

    Raises
    ------
    SizeConversionError
        On an unknown suffix, a zero default scale, or a result above
        ``limit``.
    """
    if not suffix:
        if not scale:
            raise SizeConversionError("invalid scale 0", value=suffix)
    elif suffix.lower() in _BYTE_SUFFIXES:
        scale = 1
    else:
        rest = suffix[1:]
        if not rest or rest.lower() == "ib":
            base = 1024
        elif rest.lower() == "b":
            base = 1000
        else:
            raise SizeConversionError(f"unknown suffix '{suffix}'", value=suffix)

        power = _POWERS.get(suffix[0].lower())
        if power is None:
            raise SizeConversionError(f"unknown suffix '{suffix}'", value=suffix)
        scale = base**power

    if value and value > limit // scale:
        raise SizeConversionError(f"value too large: {value}{suffix}", value=suffix)
    return value * scale


def reject_relative_size(size: str) -> None:
    """Raise ``RelativeSizeError`` if ``size`` is a percentage such as ``"50%"``."""
    match = _SIZE_RE.fullmatch(size)
    if match is not None and match.group(2) == "%":
        raise RelativeSizeError(f"can't convert relative size: '{size}'", value=size)


def convert_size(size: str) -> int:
    """Convert a size string such as ``"512M"`` into bytes.

    Parameters
    ----------
    size:
        A base-10 integer optionally followed by a unit suffix.

    Returns
    -------
    int
        The size in bytes, within the unsigned 64-bit range.

    Raises
    ------
    RelativeSizeError
        If the unit is ``%``.
    SizeConversionError
        If the number is missing, the unit is unknown, or the result
        overflows.
    """
    match = _SIZE_RE.fullmatch(size)
    if match is None:
        raise SizeConversionError(f"failed to convert size: '{size}'", value=size)

    reject_relative_size(size)
    number, unit = match.groups()

    try:
        return scale_integer(int(number), unit, 1, ULLONG_MAX)
    except SizeConversionError as exc:
        raise SizeConversionError(
            f"failed to convert size: '{size}'", value=size
        ) from exc
