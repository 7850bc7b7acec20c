"""Shared shader instances and the model/view/projection matrix block."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

__all__ = ["Registry"]

_S = TypeVar("_S")

_MODEL, _VIEW, _PROJECTION = range(3)


def _matrix(value) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
    return array


class Registry:
    """Creates each shader type once and holds the matrices all shaders share."""

    def __init__(self) -> None:
        self._matrices = np.zeros((3, 4, 4))
        self._shaders: dict[type, object] = {}

    def set_view_projection_matrix(self, view=None, projection=None) -> None:
        """Store the view and projection matrices; ``None`` leaves one unchanged."""
        if view is not None:
            self._matrices[_VIEW] = _matrix(view)
        if projection is not None:
            self._matrices[_PROJECTION] = _matrix(projection)

    def set_model_matrix(self, model=None) -> None:
        """Store the model matrix; ``None`` leaves it unchanged."""
        if model is not None:
            self._matrices[_MODEL] = _matrix(model)

    @property
    def model_matrix(self) -> np.ndarray:
        return self._matrices[_MODEL].copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._matrices[_VIEW].copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._matrices[_PROJECTION].copy()

    def get_or_create(self, shader_type: type[_S]) -> _S:
        """The single instance of ``shader_type``, created on first request."""
        shader = self._shaders.get(shader_type)
        if shader is None:
            shader = shader_type()
            self._shaders[shader_type] = shader
        return shader  # type: ignore[return-value]

    def __contains__(self, shader_type: type) -> bool:
        return shader_type in self._shaders