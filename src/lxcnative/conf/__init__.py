"""LXC configuration reader module.

Exports the ``ConfReader`` class, the ``PropertyStore`` it produces, and
the ``read_properties`` convenience function.
"""
from __future__ import annotations

from lxcnative.conf.properties import ConfReader, Property, PropertyStore, read_properties

__all__ = ["ConfReader", "Property", "PropertyStore", "read_properties"]
