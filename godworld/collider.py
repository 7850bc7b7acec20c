"""Sphere colliders for mouse picking."""

from __future__ import annotations

import math

import numpy as np

from godworld.entity import Component, Entity
from godworld.transform import Transform

__all__ = ["Collider", "intersect_ray_sphere"]

_EPSILON = float(np.finfo(np.float32).eps)


def intersect_ray_sphere(ray_origin, ray_direction, center, radius: float):
    """Where a ray enters a sphere.

    Returns ``(point, normal)`` for the first intersection in front of the
    ray's origin, or ``None`` when the ray misses.
    """
    origin = np.asarray(ray_origin, dtype=float)
    direction = np.asarray(ray_direction, dtype=float)
    centre = np.asarray(center, dtype=float)
    length = float(np.linalg.norm(direction))
    if length == 0.0:
        raise ValueError("ray direction must not be zero")
    direction = direction / length

    diff = centre - origin
    t0 = float(np.dot(diff, direction))
    distance_squared = float(np.dot(diff, diff)) - t0 * t0
    radius_squared = radius * radius
    if distance_squared > radius_squared:
        return None
    t1 = math.sqrt(radius_squared - distance_squared)
    distance = t0 - t1 if t0 > t1 + _EPSILON else t0 + t1
    if distance <= _EPSILON:
        return None

    point = origin + direction * distance
    normal = (point - centre) / radius
    return point, normal


class Collider(Component):
    """Sphere around the entity's transform; remembers whether it was hit last."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Collider")
        self._transform = entity.get_required(Transform)
        self._selected = False

    def intersect(self, ray_position, ray_direction) -> bool:
        """Test the ray against the sphere and record the result as the selection."""
        hit = intersect_ray_sphere(
            ray_position,
            ray_direction,
            self._transform.absolute_position,
            float(self._transform.scale[0]),  # spheres are scaled uniformly
        )
        self._selected = hit is not None
        return self._selected

    @property
    def selected(self) -> bool:
        return self._selected