"""Scripts that animate entities every update."""

from __future__ import annotations

import math

from godworld.entity import Entity, PlanetState, Script
from godworld.transform import Transform

__all__ = ["DemoRotation", "PlanetRotation"]

_DEMO_SPEED = 0.0001


class DemoRotation(Script):
    """Spins the entity steadily around its first Euler axis."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Demo Rotation Script")

    def execute(self, dt: int) -> None:
        transform = self.entity.get_required(Transform)
        rotation = transform.rotation
        rotation[0] += _DEMO_SPEED * dt
        transform.rotation = rotation


class PlanetRotation(Script):
    """Moves a planet along its circular orbit around the origin."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Planet Rotation Script")

    def execute(self, dt: int) -> None:
        state = self.entity.get_required(PlanetState)
        state.rotation_angle += state.rotational_speed * dt
        self.entity.get_required(Transform).position = (
            state.distance * math.sin(state.rotation_angle),
            state.distance * math.cos(state.rotation_angle),
            0.0,
        )