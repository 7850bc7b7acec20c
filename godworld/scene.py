"""Scenes: the collections of entities the applications update and pick from."""

from __future__ import annotations

from typing import Iterator

from godworld.camera import Camera, Event, EventType
from godworld.collider import Collider
from godworld.entities import create_background, create_planet, create_star, create_triangle
from godworld.entity import Entity, Script
from godworld.registry import Registry
from godworld.rng import randf, randi
from godworld.scripts import DemoRotation, PlanetRotation

__all__ = ["EditorScene", "ModelScene", "Scene", "SystemScene"]


class Scene:
    """Owns a camera and the root entities; forwards updates and input to them."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry
        self.camera = Camera()
        self._entities: list[Entity] = []

    def update(self, dt: int) -> None:
        """Advance the camera and every root entity by ``dt`` milliseconds."""
        self.camera.update(dt, self.registry)
        for entity in self._entities:
            entity.update(dt)

    def handle_input(self, event: Event) -> bool:
        """Give the event to the camera, then use mouse motion for picking.

        Returns whether the event was consumed; picking never consumes it.
        """
        if self.camera.handle_input(event):
            return True
        self._mouse_pick(event)
        return False

    def set_window_size(self, width: int, height: int) -> None:
        self.camera.set_window_size(width, height)

    def add_entity(self, entity: Entity) -> Entity:
        """Add a root entity to the scene and return it."""
        self._entities.append(entity)
        return entity

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def clear_entities(self) -> None:
        self._entities.clear()

    def _mouse_pick(self, event: Event) -> None:
        if event.type is not EventType.MOUSE_MOTION:
            return
        point, direction = self.camera.calculate_click_ray(event.x, event.y)
        for entity in self._entities:
            collider = entity.get(Collider)
            if collider is not None:
                collider.intersect(point, direction)


class SystemScene(Scene):
    """A star with one to three planets orbiting it at random distances."""

    MIN_PLANET_OFFSET = 2.0
    MAX_PLANET_OFFSET = 3.0
    MIN_PLANET_RADIUS = 0.3
    MAX_PLANET_RADIUS = 0.8
    FIRST_PLANET_OFFSET = 3.0

    def __init__(self, registry: Registry) -> None:
        super().__init__(registry)
        self.add_entity(create_background())
        self.add_entity(create_star())

        offset = self.FIRST_PLANET_OFFSET
        created = 0
        # The bound is drawn afresh before every planet.
        while created < randi(1, 3):
            offset += randf(self.MIN_PLANET_OFFSET, self.MAX_PLANET_OFFSET)
            radius = randf(self.MIN_PLANET_RADIUS, self.MAX_PLANET_RADIUS)
            planet = create_planet(offset, radius)
            planet.register_component(Script, PlanetRotation(planet))
            self.add_entity(planet)
            created += 1


class ModelScene(Scene):
    """Shows one selectable model at a time in front of the background."""

    MODELS = ("Planet", "Star")

    def __init__(self, registry: Registry) -> None:
        super().__init__(registry)
        self.add_entity(create_background())
        self._selected_model: int | None = None
        self.selected_object: int | None = None

    @property
    def selected_model(self) -> str | None:
        if self._selected_model is None:
            return None
        return self.MODELS[self._selected_model]

    def select_model(self, name: str) -> None:
        """Show the named model, replacing the current one if it differs."""
        try:
            index = self.MODELS.index(name)
        except ValueError:
            raise ValueError(f"unknown model {name!r}; expected one of {self.MODELS}") from None
        if index != self._selected_model:
            self.selected_object = None
            self._create_model(name)
        self._selected_model = index

    def entity_names(self) -> list[str]:
        """Names of all entities in the scene, each tree in pre-order."""
        return [node.name for node in self._walk()]

    def _walk(self) -> Iterator[Entity]:
        for entity in self.entities:
            yield from entity  # type: ignore[misc]

    def _create_model(self, name: str) -> None:
        self.clear_entities()
        self.add_entity(create_background())
        if name == "Planet":
            entity = create_planet(0.0, 3.0)
            entity.register_component(Script, DemoRotation(entity))
        else:
            entity = create_star()
        self.add_entity(entity)


class EditorScene(Scene):
    """An empty scene to which triangles can be added."""

    def __init__(self, registry: Registry) -> None:
        super().__init__(registry)

    def create_triangle(self) -> Entity:
        """Add a new triangle entity and return it."""
        return self.add_entity(create_triangle())