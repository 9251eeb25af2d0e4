"""Reading vertices and faces from Wavefront OBJ text."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from .geometry import Face, Vertex

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass
class ObjData:
    """Geometry read from an OBJ source."""

    vertices: list[Vertex] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    max_vertex: float = 0.0


def parse_vertex_index(token: str, vertex_count: int) -> int | None:
    """Turn a face token such as ``"3/1/2"`` into a zero-based vertex index.

    Positive indices are one-based, negative ones count back from the
    vertices read so far. Returns None when the token does not name an
    existing vertex.
    """
    index_str = token.split("/", 1)[0]
    match = _LEADING_INT.match(index_str)
    if match is None:
        return None
    index = int(match.group())
    index = index + vertex_count if index < 0 else index - 1
    if 0 <= index < vertex_count:
        return index
    return None


def _parse_vertex(fields: list[str]) -> Vertex | None:
    if len(fields) < 3:
        return None
    try:
        x, y, z = (float(value) for value in fields[:3])
    except ValueError:
        return None
    return Vertex(x, y, z)


def _parse_face(tokens: list[str], vertex_count: int) -> Face | None:
    indices = [
        index
        for index in (parse_vertex_index(token, vertex_count) for token in tokens)
        if index is not None
    ]
    return Face(indices) if indices else None


def parse_obj(lines: Iterable[str]) -> ObjData:
    """Parse ``v`` and ``f`` records from OBJ lines; other records are ignored."""
    data = ObjData()
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        prefix, rest = fields[0], fields[1:]
        if prefix == "v":
            vertex = _parse_vertex(rest)
            if vertex is not None:
                data.vertices.append(vertex)
                data.max_vertex = max(
                    data.max_vertex, abs(vertex.x), abs(vertex.y), abs(vertex.z)
                )
        elif prefix == "f":
            face = _parse_face(rest, len(data.vertices))
            if face is not None:
                data.faces.append(face)
    return data


def load_obj(path: str | os.PathLike[str]) -> ObjData:
    """Read an OBJ file. Raises OSError if the file cannot be opened."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_obj(handle)