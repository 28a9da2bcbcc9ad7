#!/usr/bin/env python3
"""Example: Quickstart for lxc-native-import

Minimal working example: import an LXC configuration, inspect the
resulting definition, and dump it as JSON.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install lxc-native-import
"""
from __future__ import annotations

from pathlib import Path

import lxcnative

CONFIG = Path(__file__).with_name("busybox.conf")


def main() -> None:
    print(f"lxc-native-import version: {lxcnative.__version__}")

    # Step 1: Import the configuration
    definition = lxcnative.parse(CONFIG.read_text(encoding="utf-8"))
    print(f"Imported container: '{definition.name}', uuid={definition.uuid}")

    # Step 2: Inspect the filesystems (proc and sys are managed by the driver)
    for fs in definition.filesystems:
        mode = "ro" if fs.read_only else "rw"
        print(f"  {fs.kind.name.lower():5} {fs.source or '-'} -> {fs.destination} ({mode})")

    # Step 3: Dump the definition
    print(lxcnative.to_json(definition))

    # Step 4: Errors name the offending key
    try:
        lxcnative.parse("lxc.utsname = broken\nlxc.rootfs = /r\nlxc.mount = /etc/fstab\n")
    except lxcnative.LxcImportError as exc:
        print(f"Import failed ({exc.key}): {exc}")


if __name__ == "__main__":
    main()
