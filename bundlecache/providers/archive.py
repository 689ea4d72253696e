# bundlecache/providers/archive.py
import zipfile
import zlib
from pathlib import Path
from typing import List, Mapping, Optional

from bundlecache.errors import LoadError
from bundlecache.importers import ResourceImporter
from bundlecache.providers.base import FileBundleProvider


class ArchiveBundle(FileBundleProvider):
    """Zip archive bundle. Holds the archive open until close()."""

    def __init__(
        self,
        path: str | Path,
        importers: Optional[Mapping[str, ResourceImporter]] = None,
    ) -> None:
        super().__init__(importers)
        self.path = Path(path)
        try:
            self._archive = zipfile.ZipFile(self.path)
        except (OSError, zipfile.BadZipFile) as e:
            raise LoadError(f"Cannot open bundle {self.path}: {e}") from e

    def _list_files(self) -> List[str]:
        # archive order
        return [
            info.filename
            for info in self._archive.infolist()
            if not info.is_dir()
        ]

    def _read_bytes(self, path: str) -> bytes:
        try:
            return self._archive.read(path)
        except KeyError as e:
            raise LoadError(f"{path} not found in bundle {self.path}") from e
        except (OSError, zipfile.BadZipFile, zlib.error) as e:
            raise LoadError(f"Cannot read {path} from {self.path}: {e}") from e

    def close(self) -> None:
        self._archive.close()
