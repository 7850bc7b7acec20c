"""Height-to-colour gradients edited as a list of coloured height stops."""

from __future__ import annotations

from godworld.color import BLACK, RGB, interpolate
from godworld.entity import Component, Entity
from godworld.models import Model

__all__ = ["ColorSelector", "ColorSelectorLine"]


class ColorSelectorLine:
    """One stop of the gradient: a height in [0, 1] and its colour."""

    def __init__(self, index: int) -> None:
        self._index = index
        self._color: RGB = BLACK
        self._height = 0.0
        self._deleted = False
        self._updated = False

    def __repr__(self) -> str:
        return f"ColorSelectorLine(index={self._index}, height={self._height}, color={self._color})"

    @property
    def index(self) -> int:
        return self._index

    @property
    def color(self) -> RGB:
        return self._color

    @property
    def height(self) -> float:
        return self._height

    @property
    def deleted(self) -> bool:
        return self._deleted

    def set_height(self, height: float) -> None:
        """Move the stop, keeping it within [0, 1]."""
        self._height = min(max(float(height), 0.0), 1.0)
        self._updated = True

    def set_color(self, color) -> None:
        components = tuple(float(c) for c in color)
        if len(components) != 3:
            raise ValueError(f"expected three colour components, got {len(components)}")
        self._color = components  # type: ignore[assignment]
        self._updated = True

    def delete(self) -> None:
        """Mark the stop for removal at the next consistency pass."""
        self._deleted = True
        self._updated = True

    def take_updated(self) -> bool:
        """Whether the stop changed since the last call; clears the flag."""
        updated = self._updated
        self._updated = False
        return updated

    def raise_to(self, height: float) -> None:
        """Lift the stop to ``height`` if it lies below it."""
        if self._height < height:
            self._height = height


class ColorSelector(Component):
    """Maps a normalized height to a colour through an ordered list of stops."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Color Selector")
        self._lines: list[ColorSelectorLine] = [ColorSelectorLine(0)]

    @property
    def lines(self) -> tuple[ColorSelectorLine, ...]:
        return tuple(self._lines)

    def add_line(self) -> ColorSelectorLine:
        """Append a new stop after the last one and return it."""
        index = self._lines[-1].index + 1 if self._lines else 0
        line = ColorSelectorLine(index)
        self._lines.append(line)
        return line

    def get_color(self, height: float) -> RGB:
        """Colour at ``height``, interpolated between the surrounding stops."""
        if not self._lines:
            raise ValueError("color selector has no lines")
        previous = None
        for line in self._lines:
            if line.height > height:
                if previous is None:
                    return line.color
                fraction = (height - previous.height) / (line.height - previous.height)
                return interpolate(previous.color, line.color, fraction)
            previous = line
        return self._lines[-1].color

    def make_consistent(self) -> bool:
        """Drop deleted stops, keep heights ascending, regenerate the model on change.

        Returns whether the entity's model was regenerated.
        """
        self._lines = [line for line in self._lines if not line.deleted]

        updated = False
        minimum = 0.0
        for line in self._lines:
            if line.take_updated():
                updated = True
            line.raise_to(minimum)
            minimum = line.height

        if updated:
            self.entity.get_required(Model).generate()
        return updated