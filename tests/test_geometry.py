import pytest

from meshview.geometry import Face, Vertex, edge_count


def test_edge_count_of_no_faces_is_zero():
    assert edge_count([]) == 0


@pytest.mark.parametrize("pairs", [1, 2, 5])
def test_even_face_gives_half_its_indices(pairs):
    face = Face(list(range(2 * pairs)))
    assert edge_count([face]) == pairs


def test_odd_face_rounds_down():
    even = Face([0, 1, 2, 3])
    odd = Face([0, 1, 2, 3, 4])
    assert edge_count([odd]) == edge_count([even])


def test_edge_count_is_sum_over_faces():
    faces = [Face([0, 1, 2]), Face([0, 1, 2, 3]), Face([4, 5, 6, 7, 0, 1])]
    assert edge_count(faces) == sum(edge_count([f]) for f in faces)


def test_edge_count_accepts_generator():
    faces = [Face([0, 1, 2, 3]), Face([1, 2, 3, 4])]
    assert edge_count(f for f in faces) == edge_count(faces)


def test_vertex_is_mutable_and_converts_to_tuple():
    vertex = Vertex(1.0, 2.0, 3.0)
    vertex.x = 4.0
    assert vertex.as_tuple() == (4.0, 2.0, 3.0)


def test_face_default_is_empty_and_independent():
    first = Face()
    second = Face()
    first.vertex_indices.append(3)
    assert second.vertex_indices == []