# bundlecache/__init__.py
from bundlecache.defaults import DEFAULT_RENAMES
from bundlecache.entry import LoadedResource, ResourceEntry
from bundlecache.errors import LoadError, LookupFailure
from bundlecache.index import ResourceIndex
from bundlecache.names import RenameTable, normalize_name
from bundlecache.providers import (
    ArchiveBundle,
    DirectoryBundle,
    MemoryProvider,
    ResourceProvider,
    open_bundle,
)
from bundlecache.settings import IndexSettings
from bundlecache.types import (
    Component,
    GameObject,
    Material,
    MeshData,
    MeshFilter,
    ShaderSource,
    SkinnedMeshRenderer,
    TextureData,
    TypeTag,
    VertexLayout,
)

__all__ = [
    "ResourceIndex",
    "IndexSettings",
    "RenameTable",
    "DEFAULT_RENAMES",
    "normalize_name",
    "ResourceEntry",
    "LoadedResource",
    "LoadError",
    "LookupFailure",
    "ResourceProvider",
    "ArchiveBundle",
    "DirectoryBundle",
    "MemoryProvider",
    "open_bundle",
    "TypeTag",
    "MeshData",
    "VertexLayout",
    "ShaderSource",
    "TextureData",
    "Material",
    "Component",
    "MeshFilter",
    "SkinnedMeshRenderer",
    "GameObject",
]
