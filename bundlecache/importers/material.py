# bundlecache/importers/material.py
import json
from typing import Any, Dict

from bundlecache.entry import LoadedResource
from bundlecache.importers.base import (
    ReferenceLoader,
    ResourceImporter,
    resource_name,
)
from bundlecache.types import Material, ShaderSource, TextureData, TypeTag


class MaterialImporter(ResourceImporter):
    """
    JSON material description:

        {
            "name": "metal_01",               # optional, defaults to file stem
            "shader": "shaders/pbr.frag",     # bundle path
            "base_color": [1, 1, 1, 1],
            "roughness": 0.5,
            "metallic": 0.0,
            "textures": {"albedo": "textures/metal.png"}
        }
    """

    def import_bytes(
        self, data: bytes, path: str, load_reference: ReferenceLoader
    ) -> LoadedResource:
        doc = load_json_object(data, path)

        shader_path = doc.get("shader")
        if not isinstance(shader_path, str):
            raise ValueError(f"Material {path} has no shader path")

        texture_paths = doc.get("textures", {})
        if not isinstance(texture_paths, dict):
            raise ValueError(f"textures must map slots to paths in {path}")
        textures: Dict[str, TextureData] = {
            str(slot): load_reference(tex_path, TextureData)
            for slot, tex_path in texture_paths.items()
        }

        channels = [float(c) for c in doc.get("base_color", (1, 1, 1, 1))]
        if len(channels) != 4:
            raise ValueError(f"base_color must have 4 channels in {path}")
        r, g, b, a = channels

        name = doc.get("name") or resource_name(path)
        if not isinstance(name, str):
            raise ValueError(f"Material name must be a string in {path}")
        material = Material(
            name=name,
            shader=load_reference(shader_path, ShaderSource),
            base_color=(r, g, b, a),
            roughness=float(doc.get("roughness", 0.5)),
            metallic=float(doc.get("metallic", 0.0)),
            textures=textures,
        )
        return LoadedResource(TypeTag.MATERIAL, material, name)


def load_json_object(data: bytes, path: str) -> Dict[str, Any]:
    try:
        doc = json.loads(data.decode("utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(doc, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return doc
