"""lxc-native-import: convert LXC native configuration into container definitions.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import lxcnative

    definition = lxcnative.parse('''
        lxc.utsname = c1
        lxc.rootfs = /var/lib/lxc/c1/rootfs
        lxc.mount.entry = /data /mnt/data none bind,ro 0 0
        lxc.network.type = veth
    ''')

    definition.name               # 'c1'
    definition.filesystems[1]     # FilesystemMount(kind=FsKind.MOUNT, ...)

    # Dump as JSON or YAML
    text = lxcnative.to_json(definition)

    lxcnative.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from lxcnative.errors import (
    LxcImportError,
    MalformedInputError,
    MissingPropertyError,
    UnsupportedFeatureError,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from lxcnative.domain.nodes import DomainDefinition


def parse(config: str) -> "DomainDefinition":
    """Import LXC configuration text into a ``DomainDefinition``.

    Parameters
    ----------
    config:
        Complete LXC configuration text.

    Returns
    -------
    DomainDefinition
        The imported definition.

    Raises
    ------
    lxcnative.LxcImportError
        If the configuration cannot be imported.
    """
    from lxcnative.importer import parse_config_string

    return parse_config_string(config)


def to_json(definition: "DomainDefinition", indent: int | None = 2) -> str:
    """Serialize a ``DomainDefinition`` to JSON text."""
    from lxcnative.domain.serializer import DefinitionSerializer

    return DefinitionSerializer().to_json(definition, indent=indent)


def to_yaml(definition: "DomainDefinition") -> str:
    """Serialize a ``DomainDefinition`` to YAML text."""
    from lxcnative.domain.serializer import DefinitionSerializer

    return DefinitionSerializer().to_yaml(definition)


__all__ = [
    "__version__",
    "parse",
    "to_json",
    "to_yaml",
    "LxcImportError",
    "MalformedInputError",
    "MissingPropertyError",
    "UnsupportedFeatureError",
]
