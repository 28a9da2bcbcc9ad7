"""Mount entry parsing.

Exports ``FstabLine`` and ``parse_fstab_line``.
"""
from __future__ import annotations

from lxcnative.fstab.parser import FstabLine, parse_fstab_line, split_fields

__all__ = ["FstabLine", "parse_fstab_line", "split_fields"]
