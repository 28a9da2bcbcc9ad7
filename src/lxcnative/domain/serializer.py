"""Definition serialization for callers of the importer.

The importer returns a ``DomainDefinition`` object and never writes it
anywhere itself.  ``DefinitionSerializer`` turns a definition into a plain
dict/list structure that maps naturally to both JSON and YAML, which is
what the CLI prints.

Usage
-----
::

    from lxcnative.domain.serializer import DefinitionSerializer

    serializer = DefinitionSerializer()
    data = serializer.to_dict(definition)
    json_text = serializer.to_json(definition, indent=2)
"""
from __future__ import annotations

import json
from enum import Enum

import yaml

from lxcnative.domain.nodes import DomainDefinition, FilesystemMount, OsDescriptor


def _enum_name(value: Enum) -> str:
    return value.name.lower()


class DefinitionSerializer:
    """Converts ``DomainDefinition`` objects to plain Python dicts.

    Enum members are emitted by lower-case name, the uuid in its canonical
    string form, and features as a sorted list so that the output is
    stable across runs.
    """

    def to_dict(self, definition: DomainDefinition) -> dict[str, object]:
        """Serialize a ``DomainDefinition`` to a JSON-compatible dict."""
        return {
            "name": definition.name,
            "uuid": str(definition.uuid),
            "id": definition.id,
            "type": definition.virt_type,
            "memory": {"unit": "KiB", "max": definition.max_memory_kib},
            "vcpus": definition.max_vcpus,
            "on_reboot": _enum_name(definition.on_reboot),
            "on_crash": _enum_name(definition.on_crash),
            "on_poweroff": _enum_name(definition.on_poweroff),
            "os": self._os_to_dict(definition.os),
            "filesystems": [self._fs_to_dict(fs) for fs in definition.filesystems],
            "features": sorted(_enum_name(f) for f in definition.features),
        }

    def _os_to_dict(self, os_desc: OsDescriptor) -> dict[str, object]:
        return {"type": os_desc.type, "init": os_desc.init}

    def _fs_to_dict(self, fs: FilesystemMount) -> dict[str, object]:
        data: dict[str, object] = {
            "kind": _enum_name(fs.kind),
            "access_mode": _enum_name(fs.access_mode),
            "source": fs.source,
            "destination": fs.destination,
            "read_only": fs.read_only,
        }
        if fs.size_bytes:
            data["size_bytes"] = fs.size_bytes
        return data

    def to_json(self, definition: DomainDefinition, indent: int | None = None) -> str:
        """Serialize a ``DomainDefinition`` to a JSON string."""
        return json.dumps(self.to_dict(definition), indent=indent)

    def to_yaml(self, definition: DomainDefinition) -> str:
        """Serialize a ``DomainDefinition`` to a YAML string."""
        return yaml.dump(
            self.to_dict(definition),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
