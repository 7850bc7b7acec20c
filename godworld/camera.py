"""Input events and the orthographic camera that looks down the z axis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

__all__ = [
    "FPS",
    "INITIAL_WINDOW_HEIGHT",
    "INITIAL_WINDOW_WIDTH",
    "SPEED",
    "Camera",
    "Event",
    "EventType",
    "Key",
]

INITIAL_WINDOW_WIDTH = 1920
INITIAL_WINDOW_HEIGHT = 1080
FPS = 60

SPEED = 0.001
"""Distance the camera moves per millisecond while a movement key is held."""

_CAMERA_DIRECTION = np.array([0.0, 0.0, -1.0])
_CAMERA_UP = np.array([0.0, 1.0, 0.0])
_NEAR = 0.1
_FAR = 100.0
_HALF_HEIGHT = 5.0


class EventType(Enum):
    QUIT = auto()
    WINDOW_RESIZED = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()
    MOUSE_MOTION = auto()


class Key(Enum):
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    Z = "z"
    X = "x"
    ESCAPE = "escape"


@dataclass(frozen=True)
class Event:
    """A window-system event: key events carry ``key``, mouse motion ``x``/``y``,
    resizes ``width``/``height``."""

    type: EventType
    key: Key | None = None
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


_MOVES = {
    Key.W: np.array([0.0, 1.0, 0.0]),
    Key.A: np.array([-1.0, 0.0, 0.0]),
    Key.S: np.array([0.0, -1.0, 0.0]),
    Key.D: np.array([1.0, 0.0, 0.0]),
}


def _ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    matrix = np.eye(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    forward = center - eye
    forward = forward / np.linalg.norm(forward)
    side = np.cross(forward, up)
    side = side / np.linalg.norm(side)
    upward = np.cross(side, forward)
    matrix = np.eye(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye)
    matrix[1, 3] = -np.dot(upward, eye)
    matrix[2, 3] = np.dot(forward, eye)
    return matrix


def _unproject(window: np.ndarray, view: np.ndarray, projection: np.ndarray, viewport) -> np.ndarray:
    inverse = np.linalg.inv(projection @ view)
    vx, vy, vw, vh = viewport
    normalized = np.array(
        [(window[0] - vx) / vw, (window[1] - vy) / vh, window[2], 1.0]
    )
    normalized[:3] = normalized[:3] * 2.0 - 1.0
    world = inverse @ normalized
    return world[:3] / world[3]


class Camera:
    """Orthographic camera moved flat across the x/y plane with W, A, S and D."""

    def __init__(self) -> None:
        self._position = np.array([0.0, 0.0, 5.0])
        self._width = INITIAL_WINDOW_WIDTH
        self._height = INITIAL_WINDOW_HEIGHT
        self._pressed: set[Key] = set()
        self._dirty = True
        self._view, self._projection = self._compute_matrices()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def window_size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    def set_window_size(self, width: int, height: int) -> None:
        """Adapt the viewport; the matrices are refreshed on the next update."""
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._dirty = True

    def calculate_click_ray(self, x: int, y: int) -> tuple[np.ndarray, np.ndarray]:
        """World-space ``(point, direction)`` of the ray under screen pixel (x, y)."""
        flipped_y = self._height - y  # window y grows downwards
        viewport = (0.0, 0.0, float(self._width), float(self._height))
        near = _unproject(np.array([x, flipped_y, 0.0]), self._view, self._projection, viewport)
        far = _unproject(np.array([x, flipped_y, 1.0]), self._view, self._projection, viewport)
        return near, far - near

    def handle_input(self, event: Event) -> bool:
        """Track the movement keys; returns whether the event was consumed."""
        if event.key not in _MOVES:
            return False
        if event.type is EventType.KEY_DOWN:
            self._pressed.add(event.key)
            return True
        if event.type is EventType.KEY_UP:
            self._pressed.discard(event.key)
            return True
        return False

    def update(self, dt: int, registry) -> None:
        """Move for ``dt`` milliseconds and push changed matrices to ``registry``."""
        self._move_flat(dt)
        if self._dirty:
            self._view, self._projection = self._compute_matrices()
            registry.set_view_projection_matrix(self._view, self._projection)
            self._dirty = False

    def _compute_matrices(self) -> tuple[np.ndarray, np.ndarray]:
        ratio = self._width / self._height
        projection = _ortho(
            -_HALF_HEIGHT * ratio, _HALF_HEIGHT * ratio, -_HALF_HEIGHT, _HALF_HEIGHT, _NEAR, _FAR
        )
        view = _look_at(self._position, self._position + _CAMERA_DIRECTION, _CAMERA_UP)
        return view, projection

    def _move_flat(self, dt: int) -> None:
        direction = sum((_MOVES[key] for key in self._pressed), np.zeros(3))
        length = float(np.linalg.norm(direction))
        if length > 0.0:
            self._position = self._position + direction / length * SPEED * float(dt)
            self._dirty = True