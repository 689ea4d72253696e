# bundlecache/providers/directory.py
from pathlib import Path
from typing import List, Mapping, Optional

from bundlecache.errors import LoadError
from bundlecache.importers import ResourceImporter
from bundlecache.providers.base import FileBundleProvider


class DirectoryBundle(FileBundleProvider):
    """Unpacked bundle rooted at a directory, enumerated in sorted order."""

    def __init__(
        self,
        root: str | Path,
        importers: Optional[Mapping[str, ResourceImporter]] = None,
    ) -> None:
        super().__init__(importers)
        self.root = Path(root)
        if not self.root.is_dir():
            raise LoadError(f"Bundle directory not found: {self.root}")

    def _list_files(self) -> List[str]:
        return sorted(
            p.relative_to(self.root).as_posix()
            for p in self.root.rglob("*")
            if p.is_file()
        )

    def _read_bytes(self, path: str) -> bytes:
        full_path = (self.root / path).resolve()
        if not full_path.is_relative_to(self.root.resolve()):
            raise LoadError(f"{path} points outside bundle {self.root}")

        try:
            return full_path.read_bytes()
        except OSError as e:
            raise LoadError(f"Cannot read {path} from {self.root}: {e}") from e
