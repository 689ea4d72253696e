# bundlecache/importers/mesh.py
from typing import List, Tuple

import numpy as np

from bundlecache.entry import LoadedResource
from bundlecache.importers.base import (
    ReferenceLoader,
    ResourceImporter,
    resource_name,
)
from bundlecache.types import MeshData, TypeTag, VertexLayout

_LAYOUT = VertexLayout(
    attributes=["in_pos", "in_normal", "in_uv"],
    format="3f 3f 2f",
    stride_bytes=32,
)


class ObjImporter(ResourceImporter):
    """
    Wavefront OBJ into MeshData.

    Supported:
      - v, vn, vt
      - triangular faces only
      - flat-expanded vertex buffer (no index buffer)
    """

    def import_bytes(
        self, data: bytes, path: str, load_reference: ReferenceLoader
    ) -> LoadedResource:
        positions: List[Tuple[float, float, float]] = []
        normals: List[Tuple[float, float, float]] = []
        uvs: List[Tuple[float, float]] = []
        vertices: List[Tuple[float, ...]] = []

        for line in data.decode("utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            tag = parts[0]

            if tag == "v":
                px, py, pz = map(float, parts[1:4])
                positions.append((px, py, pz))

            elif tag == "vn":
                nx, ny, nz = map(float, parts[1:4])
                normals.append((nx, ny, nz))

            elif tag == "vt":
                u, v = map(float, parts[1:3])
                uvs.append((u, v))

            elif tag == "f":
                if len(parts) != 4:
                    raise ValueError(
                        f"Only triangular faces supported in {path}"
                    )

                for vert in parts[1:4]:
                    v_idx, vt_idx, vn_idx = self._parse_face_vertex(vert)

                    try:
                        position = positions[v_idx]
                        normal = (
                            normals[vn_idx]
                            if vn_idx is not None
                            else (0.0, 1.0, 0.0)
                        )
                        uv = uvs[vt_idx] if vt_idx is not None else (0.0, 0.0)
                    except IndexError as e:
                        raise ValueError(
                            f"Face index out of range in {path}: {vert}"
                        ) from e

                    vertices.append((*position, *normal, *uv))

        if not vertices:
            raise ValueError(f"No geometry found in OBJ: {path}")

        interleaved = np.asarray(vertices, dtype="<f4")
        points = np.asarray(positions, dtype=np.float64)
        lo = tuple(float(c) for c in points.min(axis=0))
        hi = tuple(float(c) for c in points.max(axis=0))

        mesh = MeshData(
            vertices=interleaved.tobytes(),
            vertex_layout=_LAYOUT,
            aabb=(lo, hi),
            indices=None,
        )
        return LoadedResource(TypeTag.MESH, mesh, resource_name(path))

    def _parse_index(self, val: str) -> int | None:
        """
        If positive, convert 1-based to 0-based.
        If negative, keep as is (Python handles relative indexing natively).
        """
        if not val:
            return None
        idx = int(val)
        return idx - 1 if idx > 0 else idx

    def _parse_face_vertex(
        self, token: str
    ) -> Tuple[int, int | None, int | None]:
        """Parse a face vertex token: v/vt/vn or v//vn or v/vt"""
        parts = token.split("/")
        v = self._parse_index(parts[0])
        vt = (
            self._parse_index(parts[1]) if len(parts) > 1 and parts[1] else None
        )
        vn = (
            self._parse_index(parts[2]) if len(parts) > 2 and parts[2] else None
        )

        if v is None:
            raise ValueError(f"Invalid vertex index in token: {token}")

        return v, vt, vn
