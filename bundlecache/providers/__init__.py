# bundlecache/providers/__init__.py
from pathlib import Path

from bundlecache.providers.archive import ArchiveBundle
from bundlecache.providers.base import (
    FileBundleProvider,
    ResourceProvider,
    default_importers,
)
from bundlecache.providers.directory import DirectoryBundle
from bundlecache.providers.memory import MemoryProvider


def open_bundle(path: str | Path) -> FileBundleProvider:
    """Directory bundle for a directory, zip archive bundle otherwise."""
    if Path(path).is_dir():
        return DirectoryBundle(path)
    return ArchiveBundle(path)


__all__ = [
    "ResourceProvider",
    "FileBundleProvider",
    "ArchiveBundle",
    "DirectoryBundle",
    "MemoryProvider",
    "default_importers",
    "open_bundle",
]
