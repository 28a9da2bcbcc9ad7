"""Static defaults applied to every imported container definition.

LXC configurations do not carry these settings, so the importer seeds
them with the values the LXC driver expects.
"""
from __future__ import annotations

from typing import Final

VIRT_TYPE: Final[str] = "lxc"
OS_TYPE: Final[str] = "exe"
INIT_PATH: Final[str] = "/sbin/init"

# 64 MiB, expressed in KiB.
MAX_MEMORY_KIB: Final[int] = 64 * 1024

# CPU topology is not modelled by the LXC driver; one vCPU is the minimum
# a definition needs to validate.
MAX_VCPUS: Final[int] = 1

# -1 means the domain is not running.
INACTIVE_ID: Final[int] = -1

ROOT_DESTINATION: Final[str] = "/"
DEVICE_PATH_PREFIX: Final[str] = "/dev/"
