"""Filesystem mounts built from ``lxc.rootfs`` and ``lxc.mount.entry``.

Both entry points funnel through ``create_fs_def`` so every record
carries an absolute destination and passthrough access.

Rootfs
------
``lxc.rootfs`` is mandatory.  A value under ``/dev/`` is a block device;
anything else is a directory mounted as ``/``.

Mount entries
-------------
The destination is made absolute, entries for locations the driver
mounts itself are skipped, ``ro`` in the options makes the mount
read-only, and ``tmpfs`` entries become ``RAM`` filesystems whose size
comes from the mandatory ``size=`` option.
"""
from __future__ import annotations

import logging

from lxcnative.conf import PropertyStore
from lxcnative.domain import defaults
from lxcnative.domain.nodes import FilesystemMount, FsAccessMode, FsKind
from lxcnative.errors import MissingPropertyError
from lxcnative.filesystems.basic import is_basic_mount_location
from lxcnative.fstab import FstabLine
from lxcnative.units import convert_size, reject_relative_size

logger = logging.getLogger(__name__)

ROOTFS_KEY = "lxc.rootfs"
_SIZE_OPTION = "size="


def absolute_path(path: str) -> str:
    """Return ``path`` with a leading ``/``."""
    return path if path.startswith("/") else f"/{path}"


def create_fs_def(
    kind: FsKind,
    source: str | None,
    destination: str,
    read_only: bool = False,
    size_bytes: int = 0,
) -> FilesystemMount:
    """Build a ``FilesystemMount`` with an absolute destination."""
    return FilesystemMount(
        kind=kind,
        source=source,
        destination=absolute_path(destination),
        read_only=read_only,
        size_bytes=size_bytes,
        access_mode=FsAccessMode.PASSTHROUGH,
    )


def rootfs_mount(properties: PropertyStore) -> FilesystemMount:
    """Return the root filesystem declared by ``lxc.rootfs``.

    An empty value is rejected like a missing key, although LXC itself
    would accept ``lxc.rootfs =`` and fail later.

    Raises
    ------
    MissingPropertyError
        If ``lxc.rootfs`` is absent or has no value.
    """
    path = properties.get(ROOTFS_KEY)
    if not path:
        raise MissingPropertyError("Missing lxc.rootfs configuration", key=ROOTFS_KEY)

    kind = FsKind.BLOCK if path.startswith(defaults.DEVICE_PATH_PREFIX) else FsKind.MOUNT
    return create_fs_def(kind, path, defaults.ROOT_DESTINATION)


def _find_size_option(options: list[str]) -> str | None:
    """Return the raw value of the first ``size=`` option, if any."""
    for option in options:
        if option.startswith(_SIZE_OPTION):
            return option[len(_SIZE_OPTION):]
    return None


def fstab_mount(line: FstabLine) -> FilesystemMount | None:
    """Convert a parsed mount entry into a ``FilesystemMount``.

    Only ``tmpfs`` entries use ``size=``.  Other types ignore the option
    except for a percentage, which is rejected for every type.

    Returns
    -------
    FilesystemMount | None
        ``None`` when the destination is a basic mount location.

    Raises
    ------
    MissingPropertyError
        For a ``tmpfs`` entry without a ``size=`` option.
    RelativeSizeError
        For a ``size=`` given as a percentage.
    SizeConversionError
        For a ``tmpfs`` ``size=`` value that cannot be converted.
    """
    destination = absolute_path(line.destination)
    if is_basic_mount_location(destination):
        logger.debug("Skipping basic mount location %s", destination)
        return None

    options = line.option_list
    read_only = "ro" in options
    size = _find_size_option(options)

    if line.fs_type == "tmpfs":
        if size is None:
            raise MissingPropertyError(
                "missing tmpfs size, set the size option",
                key="lxc.mount.entry",
                value=line.options,
            )
        return create_fs_def(FsKind.RAM, None, destination, read_only, convert_size(size))

    if size is not None:
        reject_relative_size(size)
    return create_fs_def(FsKind.MOUNT, line.source, destination, read_only)
