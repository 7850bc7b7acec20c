import pytest

from godworld.entity import (
    Component,
    ComponentError,
    Entity,
    PlanetState,
    Script,
    StarState,
)


class RecordingScript(Script):
    def __init__(self, entity):
        super().__init__(entity, "Recording")
        self.calls = []

    def execute(self, dt):
        self.calls.append(dt)


def test_default_name():
    assert Entity().name == "Invalid Object Name"


def test_register_and_get():
    entity = Entity(None, "Planet")
    state = entity.register_component(PlanetState, PlanetState(entity))
    assert entity.get(PlanetState) is state
    assert entity.get_required(PlanetState) is state
    assert entity.get(StarState) is None


def test_get_required_missing_raises():
    entity = Entity(None, "Empty")
    with pytest.raises(ComponentError):
        entity.get_required(StarState)


def test_duplicate_registration_raises():
    entity = Entity(None, "Star")
    entity.create_and_register_component(StarState, entity)
    with pytest.raises(ComponentError):
        entity.create_and_register_component(StarState, entity)


def test_register_rejects_wrong_type():
    entity = Entity(None, "Star")
    with pytest.raises(TypeError):
        entity.register_component(StarState, PlanetState(entity))


def test_create_and_register_passes_arguments():
    entity = Entity(None, "Thing")
    component = entity.create_and_register_component(Component, entity, "Custom")
    assert component.name == "Custom"
    assert component.entity is entity
    assert entity.components[Component] is component


def test_components_view_is_read_only():
    entity = Entity(None, "Thing")
    with pytest.raises(TypeError):
        entity.components[Component] = Component(entity, "x")


def test_update_runs_script():
    entity = Entity(None, "Scripted")
    script = entity.register_component(Script, RecordingScript(entity))
    entity.update(16)
    entity.update(17)
    assert script.calls == [16, 17]


def test_script_is_abstract():
    with pytest.raises(TypeError):
        Script(Entity(), "abstract")


def test_state_defaults():
    entity = Entity(None, "World")
    star = entity.create_and_register_component(StarState, entity)
    planet = entity.create_and_register_component(PlanetState, entity)
    assert star.temperature == 6000
    assert planet.inhabitants == 5000
    assert planet.ownership == 0.0


def test_visit_entity_tree_names():
    root = Entity(None, "root")
    child = root.add_child(Entity(root, "child"))
    child.add_child(Entity(child, "leaf"))
    names = []
    root.visit(lambda e: names.append(e.name))
    assert names == ["root", "child", "leaf"]