"""Affine transformations applied in place to vertex lists."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .geometry import Vertex


class AffineStrategy(ABC):
    """A transformation of vertices controlled by three parameters."""

    @abstractmethod
    def apply(
        self, vertices: Iterable[Vertex], param1: float, param2: float, param3: float
    ) -> None:
        """Transform the vertices in place."""

    def update_max_vertex(
        self, max_vertex: float, param1: float, param2: float, param3: float
    ) -> float:
        """Return the model's largest coordinate after this transformation."""
        return max_vertex


class MoveAffine(AffineStrategy):
    """Translate by (dx, dy, dz)."""

    def apply(self, vertices, param1, param2, param3):
        for vertex in vertices:
            vertex.x += param1
            vertex.y += param2
            vertex.z += param3


class RotateAffine(AffineStrategy):
    """Rotate by angles in degrees about x, then y, then z."""

    def apply(self, vertices, param1, param2, param3):
        cos_x, sin_x = math.cos(math.radians(param1)), math.sin(math.radians(param1))
        cos_y, sin_y = math.cos(math.radians(param2)), math.sin(math.radians(param2))
        cos_z, sin_z = math.cos(math.radians(param3)), math.sin(math.radians(param3))
        for vertex in vertices:
            x, y, z = vertex.x, vertex.y, vertex.z
            y, z = y * cos_x - z * sin_x, y * sin_x + z * cos_x
            x, z = x * cos_y + z * sin_y, -x * sin_y + z * cos_y
            x, y = x * cos_z - y * sin_z, x * sin_z + y * cos_z
            vertex.x, vertex.y, vertex.z = x, y, z


class ScaleAffine(AffineStrategy):
    """Scale uniformly by the first parameter; a zero factor is ignored."""

    def apply(self, vertices, param1, param2, param3):
        if param1 == 0.0:
            return
        for vertex in vertices:
            vertex.x *= param1
            vertex.y *= param1
            vertex.z *= param1

    def update_max_vertex(self, max_vertex, param1, param2, param3):
        return max_vertex * param1 if param1 > 0.0 else max_vertex