import numpy as np
import pytest

from godworld import rng
from godworld.camera import Event, EventType, Key
from godworld.collider import Collider
from godworld.entity import PlanetState, Script
from godworld.registry import Registry
from godworld.scene import EditorScene, ModelScene, Scene, SystemScene
from godworld.scripts import DemoRotation, PlanetRotation
from godworld.transform import Transform
from godworld.entities import create_star


@pytest.fixture
def scene():
    return Scene(Registry())


def test_update_pushes_camera_matrices(scene):
    scene.update(16)
    np.testing.assert_allclose(scene.registry.view_matrix, scene.camera.view_matrix)
    np.testing.assert_allclose(scene.registry.projection_matrix, scene.camera.projection_matrix)


def test_camera_key_is_consumed(scene):
    assert scene.handle_input(Event(EventType.KEY_DOWN, key=Key.W)) is True
    scene.update(1000)
    assert scene.camera.position[1] > 0.0


def test_mouse_motion_selects_entity_under_cursor(scene):
    star = scene.add_entity(create_star())
    scene.update(0)
    handled = scene.handle_input(Event(EventType.MOUSE_MOTION, x=960, y=540))
    assert handled is False
    assert star.get_required(Collider).selected is True


def test_mouse_motion_away_from_entity_deselects(scene):
    star = scene.add_entity(create_star())
    scene.update(0)
    scene.handle_input(Event(EventType.MOUSE_MOTION, x=960, y=540))
    scene.handle_input(Event(EventType.MOUSE_MOTION, x=0, y=0))
    assert star.get_required(Collider).selected is False


def test_add_and_clear_entities(scene):
    star = scene.add_entity(create_star())
    assert scene.entities == (star,)
    scene.clear_entities()
    assert scene.entities == ()


def test_set_window_size(scene):
    scene.set_window_size(800, 600)
    assert scene.camera.window_size == (800, 600)
    with pytest.raises(ValueError):
        scene.set_window_size(0, 600)


def test_system_scene_layout():
    rng.seed(1)
    scene = SystemScene(Registry())
    names = [entity.name for entity in scene.entities]
    assert names[:2] == ["Background", "Star"]
    planets = scene.entities[2:]
    assert 1 <= len(planets) <= 3
    assert all(p.name == "Planet" for p in planets)
    distances = [p.get_required(PlanetState).distance for p in planets]
    assert distances == sorted(distances)
    assert distances[0] >= SystemScene.FIRST_PLANET_OFFSET + SystemScene.MIN_PLANET_OFFSET
    for planet in planets:
        assert isinstance(planet.get(Script), PlanetRotation)
        radius = planet.get_required(Transform).scale[0]
        assert SystemScene.MIN_PLANET_RADIUS <= radius < SystemScene.MAX_PLANET_RADIUS


def test_system_scene_update_moves_planets_on_orbit():
    rng.seed(2)
    scene = SystemScene(Registry())
    scene.update(100)
    for planet in scene.entities[2:]:
        distance = planet.get_required(PlanetState).distance
        position = planet.get_required(Transform).position
        assert np.linalg.norm(position) == pytest.approx(distance)


def test_model_scene_starts_with_background():
    scene = ModelScene(Registry())
    assert scene.entity_names() == ["Background"]
    assert scene.selected_model is None


def test_model_scene_select_planet():
    scene = ModelScene(Registry())
    scene.select_model("Planet")
    assert scene.entity_names() == ["Background", "Planet"]
    assert scene.selected_model == "Planet"
    planet = scene.entities[1]
    assert isinstance(planet.get(Script), DemoRotation)


def test_model_scene_reselecting_keeps_entity():
    scene = ModelScene(Registry())
    scene.select_model("Star")
    star = scene.entities[1]
    scene.select_model("Star")
    assert scene.entities[1] is star


def test_model_scene_switch_replaces_model():
    scene = ModelScene(Registry())
    scene.select_model("Planet")
    scene.select_model("Star")
    assert scene.entity_names() == ["Background", "Star"]
    assert scene.selected_model == "Star"


def test_model_scene_unknown_model():
    scene = ModelScene(Registry())
    with pytest.raises(ValueError):
        scene.select_model("Comet")


def test_editor_scene_creates_triangles():
    scene = EditorScene(Registry())
    first = scene.create_triangle()
    second = scene.create_triangle()
    assert scene.entities == (first, second)
    assert [e.name for e in scene.entities] == ["Triangle", "Triangle"]