# bundlecache/providers/base.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Type,
    TypeVar,
)

from bundlecache.entry import LoadedResource
from bundlecache.errors import LoadError
from bundlecache.importers import (
    MaterialImporter,
    ObjImporter,
    PrefabImporter,
    ResourceImporter,
    ShaderImporter,
    TextureImporter,
)
from bundlecache.types import TypeTag

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceProvider(ABC):
    """Source of the (path, resource) pairs contained in one bundle."""

    @abstractmethod
    def enumerate_paths(self) -> Sequence[str]:
        """Every loadable path in the bundle, in bundle order."""
        pass

    @abstractmethod
    def load_by_path(self, path: str) -> LoadedResource:
        """Decode one path. Raises LoadError when it cannot be read."""
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> ResourceProvider:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def default_importers() -> Dict[str, ResourceImporter]:
    texture = TextureImporter()
    shader = ShaderImporter()
    return {
        ".obj": ObjImporter(),
        ".png": texture,
        ".jpg": texture,
        ".jpeg": texture,
        ".glsl": shader,
        ".frag": shader,
        ".vert": shader,
        ".comp": shader,
        ".shader": shader,
        ".mat": MaterialImporter(),
        ".prefab": PrefabImporter(),
    }


class FileBundleProvider(ResourceProvider):
    """
    Bundle of files decoded by extension.

    Files without a registered importer are not part of the bundle's
    resources and are skipped. Materials and prefabs reference other files
    of the same bundle by path; those are decoded on first use, embedded,
    and shared with the indexed entry of the same path. A reference that
    leads back to a path still being decoded is a LoadError.
    """

    def __init__(
        self, importers: Optional[Mapping[str, ResourceImporter]] = None
    ) -> None:
        self._importers = default_importers()
        self._loaded: Dict[str, LoadedResource] = {}
        self._loading: Set[str] = set()
        if importers:
            self._importers.update(
                {ext.lower(): importer for ext, importer in importers.items()}
            )

    @abstractmethod
    def _list_files(self) -> List[str]:
        pass

    @abstractmethod
    def _read_bytes(self, path: str) -> bytes:
        """Raw file content. Raises LoadError when it cannot be read."""
        pass

    def enumerate_paths(self) -> List[str]:
        paths = []
        for path in self._list_files():
            if self._importer_for(path) is None:
                logger.debug("Skipping %s: no importer", path)
                continue
            paths.append(path)
        return paths

    def load_by_path(self, path: str) -> LoadedResource:
        cached = self._loaded.get(path)
        if cached is not None:
            return cached

        importer = self._importer_for(path)
        if importer is None:
            raise LoadError(f"No importer for {path}")
        if path in self._loading:
            raise LoadError(f"Reference cycle at {path}")

        data = self._read_bytes(path)
        self._loading.add(path)
        try:
            loaded = importer.import_bytes(data, path, self._load_reference)
        except (ValueError, KeyError, TypeError) as e:
            raise LoadError(f"Failed to load {path}: {e}") from e
        finally:
            self._loading.discard(path)

        self._loaded[path] = loaded
        return loaded

    def _load_reference(self, path: str, payload_type: Type[T]) -> T:
        loaded = self.load_by_path(path)
        if not isinstance(loaded.payload, payload_type):
            raise ValueError(
                f"{path} is a {loaded.tag}, expected {TypeTag.of(payload_type)}"
            )
        return loaded.payload

    def _importer_for(self, path: str) -> ResourceImporter | None:
        return self._importers.get(PurePosixPath(path).suffix.lower())
