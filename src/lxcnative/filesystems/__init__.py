"""Filesystem mount synthesis.

Exports the rootfs and mount-entry converters and the basic mount
location predicate.
"""
from __future__ import annotations

from lxcnative.filesystems.basic import BASIC_MOUNT_LOCATIONS, is_basic_mount_location
from lxcnative.filesystems.synthesizer import create_fs_def, fstab_mount, rootfs_mount

__all__ = [
    "BASIC_MOUNT_LOCATIONS",
    "create_fs_def",
    "fstab_mount",
    "is_basic_mount_location",
    "rootfs_mount",
]
