# bundlecache/importers/base.py
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Any, Callable, Type

from bundlecache.entry import LoadedResource

# Loads another path of the same bundle and checks it holds the given type.
ReferenceLoader = Callable[[str, Type[Any]], Any]


class ResourceImporter(ABC):
    @abstractmethod
    def import_bytes(
        self, data: bytes, path: str, load_reference: ReferenceLoader
    ) -> LoadedResource:
        """
        Decode one bundle entry into a typed payload.
        Raises ValueError on malformed input. Must be thread-safe.
        """
        pass


def resource_name(path: str) -> str:
    """Intrinsic name of a file resource: its file name without extension."""
    return PurePosixPath(path).stem
