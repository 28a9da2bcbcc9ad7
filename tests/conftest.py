"""Shared test fixtures for lxc-native-import.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

MINIMAL_CONFIG = (
    "lxc.utsname = c1\n"
    "lxc.rootfs = /var/lib/lxc/c1/rootfs\n"
)

FULL_CONFIG = """\
# Template used to create this container: /usr/share/lxc/templates/lxc-busybox
lxc.utsname = c1
lxc.rootfs = /var/lib/lxc/c1/rootfs

lxc.mount.entry = none /proc proc defaults 0 0
lxc.mount.entry = /data /mnt/data none bind,ro
lxc.mount.entry = tmpfs run tmpfs size=512M,mode=755 0 0
"""


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "lxcnative"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def minimal_config() -> str:
    """Return the smallest configuration that imports successfully."""
    return MINIMAL_CONFIG


@pytest.fixture()
def full_config() -> str:
    """Return a configuration exercising rootfs, mounts, and tmpfs."""
    return FULL_CONFIG


@pytest.fixture()
def config_file(tmp_path: Path, full_config: str) -> Path:
    """Write ``full_config`` to a temporary file and return its path."""
    path = tmp_path / "c1.conf"
    path.write_text(full_config, encoding="utf-8")
    return path
