"""LXC configuration importer module.

Exports ``parse_config_string`` and ``parse_config_file``.
"""
from __future__ import annotations

from lxcnative.importer.importer import parse_config_file, parse_config_string

__all__ = ["parse_config_file", "parse_config_string"]
