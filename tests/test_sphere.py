import numpy as np
import pytest

from godworld.entity import Entity
from godworld.models import make_model
from godworld.sphere import Sphere


def _grey(height):
    return (height, height, height)


@pytest.fixture
def entity():
    return Entity(None, "Planet")


def _faces(model):
    indices = model.indices
    return [indices[i:i + 3] for i in range(0, len(indices), 3)]


def _edges(model):
    edges = set()
    for a, b, c in _faces(model):
        for p, q in ((a, b), (b, c), (c, a)):
            edges.add((min(p, q), max(p, q)))
    return edges


def test_depth_zero_is_icosahedron(entity):
    model = make_model(Sphere, entity, _grey, depth=0)
    assert len(model.vertices) == 12


@pytest.mark.parametrize("depth", [0, 1, 2])
def test_mesh_is_closed_surface(entity, depth):
    model = make_model(Sphere, entity, _grey, depth=depth)
    faces = _faces(model)
    assert len(model.vertices) - len(_edges(model)) + len(faces) == 2
    assert all(0 <= i < len(model.vertices) for i in model.indices)
    assert {i for face in faces for i in face} == set(range(len(model.vertices)))


def test_each_subdivision_quadruples_faces(entity):
    counts = [len(_faces(make_model(Sphere, entity, _grey, depth=d))) for d in range(3)]
    assert counts[1] == 4 * counts[0]
    assert counts[2] == 4 * counts[1]


def test_vertices_lie_on_unit_sphere_without_noise(entity):
    model = make_model(Sphere, entity, _grey, depth=2)
    for vertex in model.vertices:
        assert np.isclose(np.linalg.norm(vertex.position), 1.0)
        assert vertex.normal == vertex.position


def test_color_generator_gets_zero_height_without_noise(entity):
    heights = []

    def record(height):
        heights.append(height)
        return (0.1, 0.2, 0.3)

    model = make_model(Sphere, entity, record, depth=1)
    assert set(heights) == {0.0}
    assert len(heights) == len(model.vertices)
    assert all(v.color == (0.1, 0.2, 0.3) for v in model.vertices)


def test_noise_displaces_points_and_sets_height(entity):
    def noise(point):
        return 0.25, point * 3.0

    model = make_model(Sphere, entity, _grey, noise, depth=1)
    for vertex in model.vertices:
        assert np.isclose(np.linalg.norm(vertex.position), 3.0)
        assert vertex.color == _grey(0.25)


def test_highest_vertex_leads_each_face(entity):
    def noise(point):
        factor = 1.0 + 0.1 * point[0] + 0.03 * point[1] + 0.007 * point[2]
        return float(factor), point * factor

    model = make_model(Sphere, entity, _grey, noise, depth=2)
    for face in _faces(model):
        heights = [sum(c * c for c in model.vertices[i].position) for i in face]
        top = max(heights)
        assert heights[0] == top or heights.count(top) >= 2


def test_regeneration_is_deterministic(entity):
    model = make_model(Sphere, entity, _grey, depth=1)
    before = (model.vertices, model.indices)
    model.generate()
    assert (model.vertices, model.indices) == before


def test_negative_depth_rejected(entity):
    with pytest.raises(ValueError):
        Sphere(entity, _grey, depth=-1)