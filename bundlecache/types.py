# bundlecache/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)

C = TypeVar("C", bound="Component")


@dataclass(frozen=True, slots=True)
class VertexLayout:
    """Describes vertex attributes for VAO creation."""

    attributes: Sequence[str]  # e.g. ["in_pos", "in_normal", "in_uv"]
    format: str  # buffer format string e.g. "3f 3f 2f"
    stride_bytes: int  # e.g. 32


@dataclass(frozen=True, slots=True)
class MeshData:
    """Raw mesh data decoded from a bundle, ready for GPU upload."""

    vertices: bytes
    vertex_layout: VertexLayout
    aabb: Tuple[Tuple[float, float, float], Tuple[float, float, float]]
    indices: Optional[bytes] = None
    index_count: int = 0

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // self.vertex_layout.stride_bytes


@dataclass(frozen=True, slots=True)
class TextureData:
    """Raw texture data and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # 3 (RGB) or 4 (RGBA)


@dataclass(frozen=True, slots=True)
class ShaderSource:
    """Raw shader source code."""

    source: str
    path: str  # For debugging / error reporting.


@dataclass(frozen=True)
class Material:
    """
    Surface description bound to a shader.

    Texture slots hold the decoded texture payloads, so a material is
    usable without going back to the bundle. The slot mapping is read-only.
    """

    name: str
    shader: ShaderSource
    base_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    roughness: float = 0.5
    metallic: float = 0.0
    textures: Mapping[str, TextureData] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "textures", MappingProxyType(dict(self.textures))
        )


class Component:
    """
    Base class for all game object components.
    Components should ideally be frozen @dataclasses.
    """

    pass


@dataclass(frozen=True, slots=True)
class MeshFilter(Component):
    mesh: MeshData


@dataclass(frozen=True, slots=True)
class SkinnedMeshRenderer(Component):
    shared_mesh: MeshData


@dataclass(frozen=True)
class GameObject:
    """A prefab: named node carrying components and child objects."""

    name: str
    components: Tuple[Component, ...] = ()
    children: Tuple[GameObject, ...] = ()

    def get_component(self, component_type: Type[C]) -> C | None:
        """First component of the given type on this object only."""
        for component in self.components:
            if isinstance(component, component_type):
                return component
        return None

    def get_component_in_children(self, component_type: Type[C]) -> C | None:
        """
        First component of the given type on this object or any
        descendant, searched depth-first with the object itself first.
        """
        for node in self.walk():
            component = node.get_component(component_type)
            if component is not None:
                return component
        return None

    def walk(self) -> Iterator[GameObject]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


class TypeTag(StrEnum):
    """Declared kind of an indexed resource."""

    MESH = "mesh"
    SHADER = "shader"
    MATERIAL = "material"
    TEXTURE = "texture"
    GAME_OBJECT = "game_object"

    @property
    def payload_type(self) -> Type[Any]:
        return _PAYLOAD_TYPES[self]

    @classmethod
    def of(cls, payload_type: Type[Any]) -> TypeTag:
        """Tag for a payload class. Raises TypeError for non-resource types."""
        try:
            return _TAGS_BY_TYPE[payload_type]
        except KeyError:
            raise TypeError(
                f"{getattr(payload_type, '__name__', payload_type)!s} "
                "is not a resource payload type"
            ) from None


_PAYLOAD_TYPES: Dict[TypeTag, Type[Any]] = {
    TypeTag.MESH: MeshData,
    TypeTag.SHADER: ShaderSource,
    TypeTag.MATERIAL: Material,
    TypeTag.TEXTURE: TextureData,
    TypeTag.GAME_OBJECT: GameObject,
}

_TAGS_BY_TYPE: Dict[Type[Any], TypeTag] = {
    payload_type: tag for tag, payload_type in _PAYLOAD_TYPES.items()
}
