"""Container definition model produced by the importer.

The importer only populates the fields LXC configurations can express;
everything else is seeded from ``lxcnative.domain.defaults``.  Mount
records are frozen dataclasses; the ``DomainDefinition`` itself is
mutable while the importer assembles it and is only handed to the caller
once every stage has succeeded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from uuid import UUID, uuid4

from lxcnative.domain import defaults


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class FsKind(Enum):
    """How a filesystem is provided to the container.

    BLOCK
        A host block device (``/dev/...``) mounted in the container.
    MOUNT
        A host directory bind-mounted into the container.
    RAM
        A memory-backed filesystem (tmpfs) of a fixed size.
    """

    BLOCK = auto()
    MOUNT = auto()
    RAM = auto()


class FsAccessMode(Enum):
    """Ownership mapping for files exposed to the container."""

    PASSTHROUGH = auto()


class LifecycleAction(Enum):
    """What to do when the container reboots, crashes, or powers off."""

    DESTROY = auto()
    RESTART = auto()


class DomainFeature(Enum):
    """Optional features that can be switched on for a definition."""

    PRIVNET = auto()


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FilesystemMount:
    """A filesystem made visible inside the container.

    Parameters
    ----------
    kind:
        How the filesystem is provided.
    source:
        Host path or device; ``None`` for ``RAM`` filesystems.
    destination:
        Absolute mount point inside the container.
    read_only:
        Whether the container sees the filesystem read-only.
    size_bytes:
        Size of a ``RAM`` filesystem; 0 for every other kind.
    access_mode:
        File ownership mapping; LXC mounts are always passthrough.
    """

    kind: FsKind
    source: str | None
    destination: str
    read_only: bool = False
    size_bytes: int = 0
    access_mode: FsAccessMode = FsAccessMode.PASSTHROUGH


@dataclass(frozen=True, slots=True)
class OsDescriptor:
    """Operating system block: container type plus the init program."""

    type: str = defaults.OS_TYPE
    init: str = defaults.INIT_PATH


@dataclass
class DomainDefinition:
    """A complete container definition.

    Parameters
    ----------
    name:
        Container name, from ``lxc.utsname``.
    uuid:
        Freshly generated unique identifier.
    filesystems:
        Mounts in discovery order: rootfs first, then mount entries in
        file order.
    features:
        Enabled optional features.
    """

    name: str
    uuid: UUID = field(default_factory=uuid4)
    id: int = defaults.INACTIVE_ID
    virt_type: str = defaults.VIRT_TYPE
    max_memory_kib: int = defaults.MAX_MEMORY_KIB
    max_vcpus: int = defaults.MAX_VCPUS
    on_reboot: LifecycleAction = LifecycleAction.RESTART
    on_crash: LifecycleAction = LifecycleAction.DESTROY
    on_poweroff: LifecycleAction = LifecycleAction.DESTROY
    os: OsDescriptor = field(default_factory=OsDescriptor)
    filesystems: list[FilesystemMount] = field(default_factory=list)
    features: set[DomainFeature] = field(default_factory=set)

    @property
    def root(self) -> FilesystemMount | None:
        """Return the mount whose destination is ``/``, if any."""
        for fs in self.filesystems:
            if fs.destination == defaults.ROOT_DESTINATION:
                return fs
        return None

    def has_feature(self, feature: DomainFeature) -> bool:
        """Return True if ``feature`` is enabled on this definition."""
        return feature in self.features
