"""Bundles: read-only containers of localization directories.

Submodules:
    protocol  - Bundle protocol consumed by locale resolution
    directory - DirectoryBundle backed by <tag>.lproj directories on disk
    memory    - MemoryBundle backed by dictionaries

Python 3.13+.
"""

from lprojkit.bundle.directory import DirectoryBundle
from lprojkit.bundle.memory import MemoryBundle
from lprojkit.bundle.protocol import Bundle

__all__ = [
    "Bundle",
    "DirectoryBundle",
    "MemoryBundle",
]
