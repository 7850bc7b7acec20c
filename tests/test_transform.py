import math

import numpy as np
import pytest

from godworld.entity import Entity
from godworld.registry import Registry
from godworld.transform import Transform


def make_transform(parent=None):
    entity = Entity(parent, "node")
    if parent is not None:
        parent.add_child(entity)
    transform = entity.create_and_register_component(Transform, entity)
    return entity, transform


def test_translation():
    _, transform = make_transform()
    transform.position = (1.0, 0.0, 0.0)
    assert np.allclose(transform.absolute_position, [1.0, 0.0, 0.0])


def test_rotation():
    parent, parent_transform = make_transform()
    _, child = make_transform(parent)
    child.position = (1.0, 0.0, 0.0)
    parent_transform.rotation = (0.0, 0.0, math.pi / 2)
    position = child.absolute_position
    eps = np.finfo(np.float32).eps
    assert position[0] == pytest.approx(0.0, abs=eps)
    assert position[1] == pytest.approx(1.0, abs=eps)
    assert position[2] == pytest.approx(0.0, abs=eps)


def test_child_position_is_relative_to_parent_translation():
    parent, parent_transform = make_transform()
    _, child = make_transform(parent)
    parent_transform.position = (1.0, 0.0, 0.0)
    assert np.allclose(child.absolute_position, [1.0, 0.0, 0.0])


def test_child_translation_is_relative_to_parent_translation():
    parent, parent_transform = make_transform()
    _, child = make_transform(parent)
    parent_transform.position = (1.0, 0.0, 0.0)
    child.position = (-1.0, 0.0, 0.0)
    assert np.allclose(child.absolute_position, [0.0, 0.0, 0.0])


def test_yaw_rotates_around_y_axis():
    parent, parent_transform = make_transform()
    _, child = make_transform(parent)
    child.position = (1.0, 0.0, 0.0)
    parent_transform.rotation = (math.pi / 2, 0.0, 0.0)
    assert np.allclose(child.absolute_position, [0.0, 0.0, -1.0])


def test_parent_scale_applies_to_child():
    parent, parent_transform = make_transform()
    _, child = make_transform(parent)
    parent_transform.scale_by(2.0)
    child.position = (1.0, 0.0, 0.0)
    assert np.allclose(child.absolute_position, [2.0, 0.0, 0.0])


def test_scale_by_vector_multiplies():
    _, transform = make_transform()
    transform.scale_by((2.0, 3.0, 4.0))
    transform.scale_by((0.5, 0.5, 0.5))
    assert np.allclose(transform.scale, [1.0, 1.5, 2.0])


def test_own_rotation_does_not_move_origin():
    _, transform = make_transform()
    transform.position = (3.0, -2.0, 1.0)
    transform.rotation = (0.3, 1.1, -0.7)
    assert np.allclose(transform.absolute_position, [3.0, -2.0, 1.0])


def test_setters_reject_wrong_shape():
    _, transform = make_transform()
    transform.position = (1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        transform.position = (1.0, 2.0)
    with pytest.raises(ValueError):
        transform.rotation = (1.0, 2.0, 3.0, 4.0)
    assert np.allclose(transform.position, [1.0, 2.0, 3.0])
    assert np.allclose(transform.rotation, [0.0, 0.0, 0.0])


def test_position_is_copied():
    _, transform = make_transform()
    position = transform.position
    position[0] = 9.0
    assert np.allclose(transform.position, [0.0, 0.0, 0.0])


def test_pass_model_matrix_to_shader():
    _, transform = make_transform()
    transform.position = (1.0, 2.0, 3.0)
    transform.scale_by(2.0)
    registry = Registry()
    transform.pass_model_matrix_to_shader(registry)
    assert np.allclose(registry.model_matrix, transform.model_matrix())