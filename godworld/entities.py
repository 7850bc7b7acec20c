"""Factories for the entities that populate the scenes."""

from __future__ import annotations

import numpy as np

from godworld.collider import Collider
from godworld.color import (
    BROWN,
    DARK_GREEN,
    DARK_GREY,
    GREY,
    RGB,
    calculate_star_color,
    interpolate,
)
from godworld.color_selector import ColorSelector
from godworld.entity import Entity, PlanetState, StarState
from godworld.models import BackgroundModel, Model, TriangleModel, make_model
from godworld.noise import noise3d
from godworld.rng import rand_radian, randf
from godworld.sphere import Sphere
from godworld.transform import Transform

__all__ = [
    "create_background",
    "create_planet",
    "create_star",
    "create_triangle",
    "planet_color",
    "planet_noise",
]

_SNOW_LINE = 0.95
_ROCK_LINE = 0.60
_GRASS_LINE = 0.50


def planet_color(height: float) -> RGB:
    """Default terrain colour of a planet for a normalized height in [0, 1]."""
    if height > _SNOW_LINE:
        return GREY
    if height > _ROCK_LINE:
        return interpolate(BROWN, DARK_GREY, (height - _ROCK_LINE) / (_SNOW_LINE - _ROCK_LINE))
    if height > _GRASS_LINE:
        return interpolate(DARK_GREEN, BROWN, (height - _GRASS_LINE) / (_ROCK_LINE - _GRASS_LINE))
    return DARK_GREEN


def planet_noise(point) -> tuple[float, np.ndarray]:
    """Displace a unit-sphere point by simplex noise.

    Returns the normalized height in [0, 1] and the displaced point.
    """
    p = np.asarray(point, dtype=float)
    noise = noise3d(p[0] * 2.0, p[1] * 2.0, p[2] * 2.0)
    return (noise + 1.0) / 2.0, p * (1.0 + noise / 15.0)


def create_background() -> Entity:
    """A screen-filling background quad."""
    entity = Entity(None, "Background")
    entity.create_and_register_component(Transform, entity)
    entity.register_component(Model, make_model(BackgroundModel, entity))
    return entity


def create_planet(distance: float, radius: float) -> Entity:
    """A noisy, selectable planet orbiting at ``distance`` with the given radius."""
    entity = Entity(None, "Planet")

    state = PlanetState(entity)
    state.rotational_speed = randf(0.00003, 0.0001)
    state.rotation_angle = rand_radian()
    state.distance = distance
    entity.register_component(PlanetState, state)

    def color(height: float) -> RGB:
        selector = entity.get(ColorSelector)
        if selector is not None:
            return selector.get_color(height)
        return planet_color(height)

    entity.register_component(Model, make_model(Sphere, entity, color, planet_noise))

    transform = Transform(entity)
    transform.scale_by(radius)
    entity.register_component(Transform, transform)

    entity.create_and_register_component(Collider, entity)
    entity.create_and_register_component(ColorSelector, entity)
    return entity


def create_star() -> Entity:
    """A selectable star coloured by its temperature."""
    entity = Entity(None, "Star")
    entity.create_and_register_component(StarState, entity)

    def color(_height: float) -> RGB:
        return calculate_star_color(entity.get_required(StarState).temperature)

    entity.register_component(Model, make_model(Sphere, entity, color))
    entity.create_and_register_component(Transform, entity)
    entity.create_and_register_component(Collider, entity)
    return entity


def create_triangle() -> Entity:
    """A single white triangle."""
    entity = Entity(None, "Triangle")
    entity.register_component(Model, make_model(TriangleModel, entity))
    entity.create_and_register_component(Transform, entity)
    return entity