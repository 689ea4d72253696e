# bundlecache/importers/texture.py
import io

from PIL import Image, UnidentifiedImageError

from bundlecache.entry import LoadedResource
from bundlecache.importers.base import (
    ReferenceLoader,
    ResourceImporter,
    resource_name,
)
from bundlecache.types import TextureData, TypeTag


class TextureImporter(ResourceImporter):
    def import_bytes(
        self, data: bytes, path: str, load_reference: ReferenceLoader
    ) -> LoadedResource:
        # Pillow decodes lazily, truncated files only fail in convert().
        try:
            with Image.open(io.BytesIO(data)) as img:
                converted = img.convert("RGBA")

                # NOTE: if OpenGL coordinate mismatch occurs
                # converted = converted.transpose(Image.FLIP_TOP_BOTTOM)

                width, height = converted.size
                pixels = converted.tobytes()
        except (UnidentifiedImageError, OSError) as e:
            raise ValueError(f"Unreadable image: {path}: {e}") from e

        return LoadedResource(
            TypeTag.TEXTURE,
            TextureData(data=pixels, width=width, height=height, components=4),
            resource_name(path),
        )
