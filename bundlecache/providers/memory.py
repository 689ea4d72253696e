# bundlecache/providers/memory.py
from typing import Dict, Iterable, List, Tuple

from bundlecache.entry import LoadedResource
from bundlecache.errors import LoadError
from bundlecache.providers.base import ResourceProvider


class MemoryProvider(ResourceProvider):
    """Resources that already live in memory, yielded in the given order."""

    def __init__(self, resources: Iterable[Tuple[str, LoadedResource]]) -> None:
        self._paths: List[str] = []
        self._resources: Dict[str, LoadedResource] = {}
        for path, loaded in resources:
            if path not in self._resources:
                self._paths.append(path)
            self._resources[path] = loaded

    def enumerate_paths(self) -> List[str]:
        return list(self._paths)

    def load_by_path(self, path: str) -> LoadedResource:
        try:
            return self._resources[path]
        except KeyError:
            raise LoadError(f"{path} not found in memory bundle") from None
