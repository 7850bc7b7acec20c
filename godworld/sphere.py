"""Icosphere meshes with optional noise displacement."""

from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np

from godworld.entity import Entity
from godworld.models import Model, Vector3, Vertex

__all__ = ["ColorGenerator", "NoiseFunction", "Sphere"]

ColorGenerator = Callable[[float], Vector3]
NoiseFunction = Callable[[np.ndarray], "tuple[float, np.ndarray]"]

_D = (1.0 + math.sqrt(5.0)) / 2.0

_ICOSAHEDRON_VERTICES = (
    (-1.0, _D, 0.0), (1.0, _D, 0.0), (-1.0, -_D, 0.0), (1.0, -_D, 0.0),
    (0.0, -1.0, _D), (0.0, 1.0, _D), (0.0, -1.0, -_D), (0.0, 1.0, -_D),
    (_D, 0.0, -1.0), (_D, 0.0, 1.0), (-_D, 0.0, -1.0), (-_D, 0.0, 1.0),
)

_ICOSAHEDRON_FACES = (
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
)


def _normalized(point) -> np.ndarray:
    array = np.asarray(point, dtype=float)
    return array / np.linalg.norm(array)


class Sphere(Model):
    """A subdivided icosahedron projected onto the unit sphere.

    ``noise_function`` is called with every new point on the unit sphere and
    returns ``(normalized_height, displaced_point)``; the height is handed to
    ``color_generator``. Without a noise function every height is 0.
    """

    def __init__(
        self,
        entity: Entity,
        color_generator: ColorGenerator,
        noise_function: Optional[NoiseFunction] = None,
        depth: int = 4,
    ) -> None:
        if depth < 0:
            raise ValueError(f"depth must not be negative, got {depth}")
        super().__init__(entity, "Sphere Model")
        self.depth = depth
        self._color_generator = color_generator
        self._noise_function = noise_function

    def _build(self) -> tuple[list[Vertex], list[int]]:
        vertices: list[Vertex] = []
        midpoints: dict[tuple[int, int], int] = {}

        def create_vertex(point: np.ndarray) -> int:
            height = 0.0
            if self._noise_function is not None:
                height, point = self._noise_function(point)
            vertices.append(Vertex(point, point, self._color_generator(height)))
            return len(vertices) - 1

        def midpoint(first: int, second: int) -> int:
            key = (min(first, second), max(first, second))
            index = midpoints.get(key)
            if index is None:
                middle = (np.array(vertices[first].position) + np.array(vertices[second].position)) / 2.0
                index = midpoints[key] = create_vertex(_normalized(middle))
            return index

        for corner in _ICOSAHEDRON_VERTICES:
            create_vertex(_normalized(corner))

        faces = list(_ICOSAHEDRON_FACES)
        for _ in range(self.depth):
            subdivided = []
            for v1, v2, v3 in faces:
                a = midpoint(v1, v2)
                b = midpoint(v2, v3)
                c = midpoint(v3, v1)
                subdivided.extend([(v1, a, c), (v2, b, a), (v3, c, b), (a, b, c)])
            faces = subdivided

        def height(index: int) -> float:
            return sum(c * c for c in vertices[index].position)

        indices: list[int] = []
        for v1, v2, v3 in faces:
            h1, h2, h3 = height(v1), height(v2), height(v3)
            # The highest vertex leads so flat shading takes its colour.
            if h1 > h2 and h1 > h3:
                indices.extend((v1, v2, v3))
            elif h2 > h1 and h2 > h3:
                indices.extend((v2, v3, v1))
            else:
                indices.extend((v3, v1, v2))
        return vertices, indices