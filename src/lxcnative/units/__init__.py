"""Unit conversion helpers.

Exports ``convert_size``, ``reject_relative_size`` and the lower-level
``scale_integer``.
"""
from __future__ import annotations

from lxcnative.units.size import ULLONG_MAX, convert_size, reject_relative_size, scale_integer

__all__ = ["ULLONG_MAX", "convert_size", "reject_relative_size", "scale_integer"]
