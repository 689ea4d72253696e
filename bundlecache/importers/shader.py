# bundlecache/importers/shader.py
from bundlecache.entry import LoadedResource
from bundlecache.importers.base import (
    ReferenceLoader,
    ResourceImporter,
    resource_name,
)
from bundlecache.types import ShaderSource, TypeTag


class ShaderImporter(ResourceImporter):
    def import_bytes(
        self, data: bytes, path: str, load_reference: ReferenceLoader
    ) -> LoadedResource:
        try:
            source = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"Shader source is not UTF-8: {path}") from e

        return LoadedResource(
            TypeTag.SHADER,
            ShaderSource(source=source, path=path),
            resource_name(path),
        )
