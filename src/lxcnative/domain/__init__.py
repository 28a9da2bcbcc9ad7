"""Container definition model.

Exports the definition node types, their enums, and the
``DefinitionSerializer`` used by callers to dump definitions.
"""
from __future__ import annotations

from lxcnative.domain.nodes import (
    DomainDefinition,
    DomainFeature,
    FilesystemMount,
    FsAccessMode,
    FsKind,
    LifecycleAction,
    OsDescriptor,
)
from lxcnative.domain.serializer import DefinitionSerializer

__all__ = [
    "DefinitionSerializer",
    "DomainDefinition",
    "DomainFeature",
    "FilesystemMount",
    "FsAccessMode",
    "FsKind",
    "LifecycleAction",
    "OsDescriptor",
]
