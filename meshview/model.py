"""The mesh model: vertices, faces and transformations applied to them."""

from __future__ import annotations

import os

from .affine import AffineStrategy
from .geometry import Face, Vertex, edge_count
from .obj_loader import load_obj


class Model:
    """Holds a loaded mesh, centred and normalised on load."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._faces: list[Face] = []
        self._max_vertex = 0.0

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def faces(self) -> tuple[Face, ...]:
        return tuple(self._faces)

    @property
    def max_vertex(self) -> float:
        return self._max_vertex

    def load_from_file(self, path: str | os.PathLike[str]) -> None:
        """Load an OBJ file, replacing the current mesh.

        Raises OSError if the file cannot be opened; the mesh is then unchanged.
        """
        data = load_obj(path)
        self._vertices = data.vertices
        self._faces = data.faces
        self._max_vertex = data.max_vertex
        self._center_and_normalize()

    def apply_affine(
        self, affine: AffineStrategy, param1: float, param2: float, param3: float
    ) -> None:
        affine.apply(self._vertices, param1, param2, param3)
        self._max_vertex = affine.update_max_vertex(
            self._max_vertex, param1, param2, param3
        )

    def edge_count(self) -> int:
        return edge_count(self._faces)

    def _center_and_normalize(self) -> None:
        if not self._vertices:
            return
        xs = [v.x for v in self._vertices]
        ys = [v.y for v in self._vertices]
        zs = [v.z for v in self._vertices]
        mid_x = (min(xs) + max(xs)) / 2.0
        mid_y = (min(ys) + max(ys)) / 2.0
        mid_z = (min(zs) + max(zs)) / 2.0
        scale = 2.0 / self._max_vertex if self._max_vertex > 1.0 else 1.0
        for vertex in self._vertices:
            vertex.x = (vertex.x - mid_x) * scale
            vertex.y = (vertex.y - mid_y) * scale
            vertex.z = (vertex.z - mid_z) * scale