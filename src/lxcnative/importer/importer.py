"""LXC native configuration importer.

Converts LXC configuration text into a ``DomainDefinition``.

Stages run in a fixed order and the first failure aborts the import:

    1. read the text into a ``PropertyStore``
    2. seed a definition with the LXC driver defaults
    3. ``lxc.utsname`` (mandatory)
    4. ``lxc.rootfs`` (mandatory)
    5. reject ``lxc.mount``
    6. every ``lxc.mount.entry``, in file order
    7. ``lxc.network.type`` aggregation

The definition is built locally and only returned once every stage has
succeeded; callers never see a partially imported definition.
"""
from __future__ import annotations

import logging
from pathlib import Path

from lxcnative.conf import PropertyStore, read_properties
from lxcnative.domain.nodes import DomainDefinition, DomainFeature, FilesystemMount
from lxcnative.errors import MissingPropertyError, UnsupportedFeatureError
from lxcnative.filesystems import fstab_mount, rootfs_mount
from lxcnative.fstab import parse_fstab_line
from lxcnative.network import convert_network_settings

logger = logging.getLogger(__name__)

NAME_KEY = "lxc.utsname"
FSTAB_KEY = "lxc.mount"
MOUNT_ENTRY_KEY = "lxc.mount.entry"


def _mount_entries(properties: PropertyStore) -> list[FilesystemMount]:
    """Convert every ``lxc.mount.entry`` into a mount, skipping basic ones."""
    mounts: list[FilesystemMount] = []
    for entry in properties:
        if entry.key != MOUNT_ENTRY_KEY:
            continue
        fs = fstab_mount(parse_fstab_line(entry.value))
        if fs is not None:
            logger.debug("Adding mount %s (line %d)", fs.destination, entry.line)
            mounts.append(fs)
    return mounts


def parse_config_string(config: str) -> DomainDefinition:
    """Import LXC configuration text.

    Parameters
    ----------
    config:
        Complete LXC configuration text.

    Returns
    -------
    DomainDefinition
        The fully populated definition, with a freshly generated uuid.

    Raises
    ------
    MalformedInputError
        If the text, a mount entry, or a size cannot be parsed.
    MissingPropertyError
        If ``lxc.utsname``, ``lxc.rootfs``, or a tmpfs size is missing.
    UnsupportedFeatureError
        If ``lxc.mount`` is used or a size is relative.

    Notes
    -----
    An empty ``lxc.utsname =`` or ``lxc.rootfs =`` is rejected like a
    missing key.  LXC itself accepts both and only fails later.
    """
    properties = read_properties(config)

    name = properties.get(NAME_KEY)
    if not name:
        raise MissingPropertyError(f"Missing {NAME_KEY} configuration", key=NAME_KEY)

    definition = DomainDefinition(name=name)
    definition.filesystems.append(rootfs_mount(properties))

    if FSTAB_KEY in properties:
        raise UnsupportedFeatureError(
            "lxc.mount found, use lxc.mount.entry lines instead",
            key=FSTAB_KEY,
            value=properties.get(FSTAB_KEY),
        )

    definition.filesystems.extend(_mount_entries(properties))

    if convert_network_settings(properties):
        definition.features.add(DomainFeature.PRIVNET)

    logger.debug(
        "Imported container %r with %d filesystem(s)",
        definition.name,
        len(definition.filesystems),
    )
    return definition


def parse_config_file(path: str | Path) -> DomainDefinition:
    """Read an LXC configuration file and import it.

    Raises
    ------
    OSError
        If the file cannot be read.
    LxcImportError
        If the configuration cannot be imported.
    """
    return parse_config_string(Path(path).read_text(encoding="utf-8"))
