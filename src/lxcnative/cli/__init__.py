"""CLI package.

The ``cli`` sub-package contains the Click application. It should import
only from the public API of the parent package and its top-level
sub-packages.
"""
from __future__ import annotations
