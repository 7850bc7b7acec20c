"""Vertex/index meshes attached to entities, and the simple built-in meshes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, TypeVar

import numpy as np

from godworld.color import BLUE, YELLOW
from godworld.entity import Component, Entity

__all__ = [
    "BackgroundModel",
    "Model",
    "RenderingMode",
    "TriangleModel",
    "Vector3",
    "VectorModel",
    "Vertex",
    "make_model",
]

Vector3 = tuple[float, float, float]

_M = TypeVar("_M", bound="Model")


def _as_vec3(value) -> Vector3:
    components = tuple(float(c) for c in value)
    if len(components) != 3:
        raise ValueError(f"expected three components, got {len(components)}")
    return components  # type: ignore[return-value]


class RenderingMode(Enum):
    """How the index list is assembled into primitives."""

    TRIANGLES = "triangles"
    LINES = "lines"


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex; every field is an (x, y, z) or (r, g, b) triple."""

    position: Vector3
    normal: Vector3 = (0.0, 0.0, 0.0)
    color: Vector3 = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _as_vec3(self.position))
        object.__setattr__(self, "normal", _as_vec3(self.normal))
        object.__setattr__(self, "color", _as_vec3(self.color))


class Model(Component, ABC):
    """A mesh component; subclasses describe how its vertices are built."""

    rendering_mode = RenderingMode.TRIANGLES

    def __init__(self, entity: Entity, name: str) -> None:
        super().__init__(entity, name)
        self._vertices: tuple[Vertex, ...] = ()
        self._indices: tuple[int, ...] = ()

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return self._vertices

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    def generate(self) -> None:
        """Rebuild the vertices and indices from scratch."""
        vertices, indices = self._build()
        self._vertices = tuple(vertices)
        self._indices = tuple(int(i) for i in indices)

    @abstractmethod
    def _build(self) -> tuple[Sequence[Vertex], Sequence[int]]:
        """Return the fresh vertex list and index list of the mesh."""


class BackgroundModel(Model):
    """A screen-filling quad made of two triangles."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Background Model")

    def _build(self) -> tuple[list[Vertex], list[int]]:
        corners = [(-1.0, 1.0, 0.0), (1.0, 1.0, 0.0), (-1.0, -1.0, 0.0), (1.0, -1.0, 0.0)]
        return [Vertex(corner) for corner in corners], [0, 3, 1, 0, 2, 3]


class VectorModel(Model):
    """A line of length two from the origin along a direction."""

    rendering_mode = RenderingMode.LINES

    def __init__(self, entity: Entity, direction) -> None:
        super().__init__(entity, "Vector Model")
        self._direction = np.array(_as_vec3(direction))
        if not np.linalg.norm(self._direction) > 0.0:
            raise ValueError("vector direction must not be zero")

    @property
    def direction(self) -> Vector3:
        return _as_vec3(self._direction)

    def _build(self) -> tuple[list[Vertex], list[int]]:
        tip = self._direction / np.linalg.norm(self._direction) * 2.0
        origin = (0.0, 0.0, 0.0)
        return [Vertex(origin, origin, BLUE), Vertex(tip, tip, YELLOW)], [0, 1]


class TriangleModel(Model):
    """A single white triangle facing the positive z axis."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Triangle")

    def _build(self) -> tuple[list[Vertex], list[int]]:
        normal = (0.0, 0.0, 1.0)
        white = (1.0, 1.0, 1.0)
        corners = [(0.0, 1.0, 0.0), (-0.5, -0.5, 0.0), (0.5, -0.5, 0.0)]
        return [Vertex(corner, normal, white) for corner in corners], [0, 1, 2]


def make_model(model_type: type[_M], *args: Any, **kwargs: Any) -> _M:
    """Construct a model and generate its mesh straight away."""
    model = model_type(*args, **kwargs)
    model.generate()
    return model