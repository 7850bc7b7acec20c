"""Position, rotation and scale of an entity and its model matrix."""

from __future__ import annotations

import numpy as np

from godworld.entity import Component, Entity

__all__ = ["Transform"]


def _vec3(value) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected three components, got shape {array.shape}")
    return array


def _translation(offset: np.ndarray) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = offset
    return matrix


def _scaling(factors: np.ndarray) -> np.ndarray:
    return np.diag([*factors, 1.0])


def _rotation_yxz(yaw: float, pitch: float, roll: float) -> np.ndarray:
    cy, sy = np.cos(yaw), np.sin(yaw)
    cx, sx = np.cos(pitch), np.sin(pitch)
    cz, sz = np.cos(roll), np.sin(roll)
    around_y = np.array([[cy, 0.0, sy, 0.0], [0.0, 1.0, 0.0, 0.0], [-sy, 0.0, cy, 0.0], [0.0, 0.0, 0.0, 1.0]])
    around_x = np.array([[1.0, 0.0, 0.0, 0.0], [0.0, cx, -sx, 0.0], [0.0, sx, cx, 0.0], [0.0, 0.0, 0.0, 1.0]])
    around_z = np.array([[cz, -sz, 0.0, 0.0], [sz, cz, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0], [0.0, 0.0, 0.0, 1.0]])
    return around_y @ around_x @ around_z


class Transform(Component):
    """Location and orientation relative to the parent entity's transform.

    ``rotation`` holds Euler angles applied in Y, X, Z order.
    """

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Transform")
        parent = entity.parent
        self._parent: Transform | None = parent.get(Transform) if parent is not None else None
        self._position = np.zeros(3)
        self._scale = np.ones(3)
        self._rotation = np.zeros(3)

    @property
    def position(self) -> np.ndarray:
        """Position relative to the parent."""
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value)

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value) -> None:
        self._rotation = _vec3(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value) -> None:
        self._scale = _vec3(value)

    def scale_by(self, factor) -> None:
        """Multiply the scale by a scalar or per-axis factor."""
        self._scale = _vec3(self._scale * np.asarray(factor, dtype=float))

    @property
    def absolute_position(self) -> np.ndarray:
        """Origin of this transform in world space."""
        return (self.model_matrix() @ np.array([0.0, 0.0, 0.0, 1.0]))[:3]

    def model_matrix(self) -> np.ndarray:
        """Translate * rotate * scale, preceded by the parent's model matrix."""
        matrix = _translation(self._position) @ _rotation_yxz(*self._rotation) @ _scaling(self._scale)
        if self._parent is not None:
            matrix = self._parent.model_matrix() @ matrix
        return matrix

    def pass_model_matrix_to_shader(self, registry) -> None:
        """Store this transform's model matrix in the shader registry."""
        registry.set_model_matrix(self.model_matrix())