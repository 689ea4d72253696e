# bundlecache/importers/__init__.py
from bundlecache.importers.base import ReferenceLoader, ResourceImporter
from bundlecache.importers.material import MaterialImporter
from bundlecache.importers.mesh import ObjImporter
from bundlecache.importers.prefab import PrefabImporter
from bundlecache.importers.shader import ShaderImporter
from bundlecache.importers.texture import TextureImporter

__all__ = [
    "ReferenceLoader",
    "ResourceImporter",
    "ObjImporter",
    "ShaderImporter",
    "TextureImporter",
    "MaterialImporter",
    "PrefabImporter",
]
