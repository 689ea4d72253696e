import zipfile

import pytest
from PIL import Image

from bundlecache import IndexSettings, MemoryProvider, RenameTable, ResourceIndex
from tests.factories import BUNDLE_FILES


@pytest.fixture
def build_index():
    """Builds a ResourceIndex from (path, LoadedResource) pairs."""

    def _build(resources, renames=None, **settings):
        if renames is not None:
            settings["renames"] = RenameTable(renames)
        return ResourceIndex.build(
            MemoryProvider(resources), settings=IndexSettings(**settings)
        )

    return _build


@pytest.fixture
def bundle_dir(tmp_path):
    """Unpacked bundle on disk with one resource of every kind."""
    root = tmp_path / "bundle"
    for rel_path, content in BUNDLE_FILES.items():
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)

    (root / "textures").mkdir()
    Image.new("RGB", (2, 2), color="red").save(root / "textures" / "rust.png")
    return root


@pytest.fixture
def bundle_zip(tmp_path, bundle_dir):
    """The same bundle packed into a zip archive."""
    archive_path = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        for path in sorted(bundle_dir.rglob("*")):
            if path.is_file():
                archive.write(path, path.relative_to(bundle_dir).as_posix())
    return archive_path
