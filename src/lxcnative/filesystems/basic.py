"""Mount points the LXC driver sets up itself inside every container.

User configuration must not redefine these; mount entries targeting them
are dropped by the importer.
"""
from __future__ import annotations

from typing import Final

BASIC_MOUNT_LOCATIONS: Final[frozenset[str]] = frozenset({
    "/proc",
    "/proc/sys",
    "/sys",
    "/sys/kernel/security",
    "/sys/fs/selinux",
})


def is_basic_mount_location(path: str) -> bool:
    """Return True if ``path`` is a mount point managed by the driver."""
    return path in BASIC_MOUNT_LOCATIONS
