"""Basic geometric records shared by the mesh model and the OBJ loader."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(slots=True)
class Vertex:
    """A mutable point in 3D space."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(slots=True)
class Face:
    """A polygon given by zero-based indices into a vertex list."""

    vertex_indices: list[int] = field(default_factory=list)


def edge_count(faces: Iterable[Face]) -> int:
    """Count edges as half the number of indices of each face, summed."""
    return sum(len(face.vertex_indices) // 2 for face in faces)