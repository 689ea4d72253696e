# bundlecache/importers/prefab.py
from typing import Any, Callable, Dict, List

from bundlecache.entry import LoadedResource
from bundlecache.importers.base import (
    ReferenceLoader,
    ResourceImporter,
    resource_name,
)
from bundlecache.importers.material import load_json_object
from bundlecache.types import (
    Component,
    GameObject,
    MeshData,
    MeshFilter,
    SkinnedMeshRenderer,
    TypeTag,
)

_COMPONENTS: Dict[str, Callable[[MeshData], Component]] = {
    "mesh_filter": lambda mesh: MeshFilter(mesh=mesh),
    "skinned_mesh_renderer": lambda mesh: SkinnedMeshRenderer(shared_mesh=mesh),
}


class PrefabImporter(ResourceImporter):
    """
    JSON game object hierarchy:

        {
            "name": "barrel",
            "components": [{"type": "mesh_filter", "mesh": "meshes/barrel.obj"}],
            "children": [{"name": "lid", "components": [...], "children": []}]
        }
    """

    def import_bytes(
        self, data: bytes, path: str, load_reference: ReferenceLoader
    ) -> LoadedResource:
        doc = load_json_object(data, path)
        root = self._build(doc, resource_name(path), path, load_reference)
        return LoadedResource(TypeTag.GAME_OBJECT, root, root.name)

    def _build(
        self,
        node: Dict[str, Any],
        default_name: str,
        path: str,
        load_reference: ReferenceLoader,
    ) -> GameObject:
        components: List[Component] = []
        for entry in node.get("components", []):
            if not isinstance(entry, dict):
                raise ValueError(f"Components must be JSON objects in {path}")
            kind = entry.get("type")
            factory = _COMPONENTS.get(kind)
            if factory is None:
                raise ValueError(f"Unknown component type {kind!r} in {path}")
            mesh_path = entry.get("mesh")
            if not isinstance(mesh_path, str):
                raise ValueError(f"Component {kind} has no mesh path in {path}")
            components.append(factory(load_reference(mesh_path, MeshData)))

        children = []
        for child in node.get("children", []):
            if not isinstance(child, dict):
                raise ValueError(f"Child objects must be JSON objects in {path}")
            children.append(self._build(child, "", path, load_reference))

        name = node.get("name") or default_name
        if not isinstance(name, str) or not name:
            raise ValueError(f"Game object without a string name in {path}")

        return GameObject(
            name=name, components=tuple(components), children=tuple(children)
        )
