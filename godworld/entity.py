"""Entities and the components that can be attached to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from godworld.tree import TreeNode

__all__ = [
    "Component",
    "ComponentError",
    "Entity",
    "PlanetState",
    "Script",
    "StarState",
]

_C = TypeVar("_C", bound="Component")


class ComponentError(Exception):
    """A component is missing or registered twice."""


class Component:
    """Behaviour or data attached to an entity."""

    def __init__(self, entity: Entity, name: str) -> None:
        self.entity = entity
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Script(Component, ABC):
    """A component run once per update with the elapsed milliseconds."""

    @abstractmethod
    def execute(self, dt: int) -> None:
        """Advance the script by ``dt`` milliseconds."""


class PlanetState(Component):
    """Orbit and population state of a planet."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Planet State")
        self.rotational_speed = 0.0
        self.rotation_angle = 0.0
        self.distance = 0.0
        self.inhabitants = 5000
        self.ownership = 0.0


class StarState(Component):
    """State of a star; temperature is in Kelvin."""

    def __init__(self, entity: Entity) -> None:
        super().__init__(entity, "Star State")
        self.temperature = 6000


class Entity(TreeNode):
    """A named tree node holding at most one component per component kind."""

    def __init__(self, parent: Entity | None = None, name: str = "Invalid Object Name") -> None:
        super().__init__(parent)
        self.name = name
        self._components: dict[type, Component] = {}

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r})"

    def update(self, dt: int) -> None:
        """Run the entity's script, if it has one."""
        script = self.get(Script)
        if script is not None:
            script.execute(dt)

    @property
    def components(self) -> Mapping[type, Component]:
        """Read-only view of the registered components by kind."""
        return MappingProxyType(self._components)

    def register_component(self, kind: type[_C], component: _C) -> _C:
        """Attach ``component`` under ``kind``; each kind may be registered once."""
        if not isinstance(component, kind):
            raise TypeError(f"{component!r} is not a {kind.__name__}")
        if kind in self._components:
            raise ComponentError(f"{kind.__name__} is already registered on {self.name!r}")
        self._components[kind] = component
        return component

    def create_and_register_component(self, kind: type[_C], *args: Any, **kwargs: Any) -> _C:
        """Build ``kind(*args, **kwargs)`` and register it under ``kind``."""
        return self.register_component(kind, kind(*args, **kwargs))

    def get(self, kind: type[_C]) -> _C | None:
        """The component registered under ``kind``, or ``None``."""
        return self._components.get(kind)  # type: ignore[return-value]

    def get_required(self, kind: type[_C]) -> _C:
        """The component registered under ``kind``; raises if there is none."""
        component = self.get(kind)
        if component is None:
            raise ComponentError(f"{self.name!r} has no {kind.__name__} component")
        return component