import pytest

from ethrl.core.clock import Time
from ethrl.framework.actor import Actor
from ethrl.framework.component import Component
from ethrl.framework.factory import Factory
from ethrl.maths.transform import Transform
from ethrl.maths.vector2 import Vector2
from ethrl.serialization import get_string


class Probe(Component):
    def __init__(self):
        super().__init__()
        self.label = ""
        self.updates = 0
        self.initialized = 0

    def initialize(self):
        self.initialized += 1

    def update(self):
        self.updates += 1

    def read(self, value):
        self.label = get_string(value, "label") or ""


class Painter(Probe):
    def draw(self, renderer):
        renderer.append(self.label)


@pytest.fixture
def factory():
    registry = Factory.instance()
    registry.register("Probe", Probe)
    yield registry
    registry.shutdown()


def fixed_clock(*moments):
    values = iter(moments)
    return Time(clock=lambda: next(values))


def test_add_component_sets_owner():
    actor = Actor()
    probe = Probe()
    actor.add_component(probe)
    assert probe.owner is actor
    assert actor.components == [probe]


def test_get_component_by_type():
    actor = Actor()
    probe = Probe()
    painter = Painter()
    actor.add_component(probe)
    actor.add_component(painter)
    assert actor.get_component(Painter) is painter
    assert actor.get_component(Probe) is probe


def test_get_component_missing_returns_none():
    assert Actor().get_component(Probe) is None


def test_add_child_sets_parent_and_scene():
    parent = Actor()
    parent.scene = object()
    child = Actor()
    parent.add_child(child)
    assert child.parent is parent
    assert child.scene is parent.scene
    assert parent.children == [child]


def test_update_runs_components_and_children():
    parent = Actor()
    child = Actor()
    parent.add_child(child)
    probe = Probe()
    child.add_component(probe)
    parent.update()
    assert probe.updates == 1


def test_inactive_actor_is_not_updated():
    actor = Actor()
    probe = Probe()
    actor.add_component(probe)
    actor.active = False
    actor.update()
    assert probe.updates == 0


def test_update_refreshes_matrix():
    actor = Actor(Transform(position=Vector2(5, 6), rotation=30.0, scale=Vector2(2, 2)))
    actor.update()
    assert actor.transform.matrix == actor.transform.to_matrix3()


def test_child_matrix_is_composed_with_parent():
    parent = Actor(Transform(position=Vector2(10, 0)))
    child = Actor(Transform(position=Vector2(0, 4)))
    parent.add_child(child)
    parent.update()
    assert child.transform.matrix == parent.transform.matrix * child.transform.to_matrix3()


def test_lifespan_expiry_destroys_actor():
    actor = Actor()
    actor.clock = fixed_clock(0.0, 0.5)
    actor.clock.tick()
    actor.lifespan = 0.25
    actor.update()
    assert actor.destroyed is True


def test_lifespan_not_expired_keeps_actor():
    actor = Actor()
    actor.clock = fixed_clock(0.0, 0.5)
    actor.clock.tick()
    actor.lifespan = 2.0
    actor.update()
    assert actor.destroyed is False
    assert actor.lifespan == pytest.approx(1.5)


def test_initialize_reaches_components_and_children():
    parent = Actor()
    child = Actor()
    parent.add_child(child)
    first, second = Probe(), Probe()
    parent.add_component(first)
    child.add_component(second)
    parent.initialize()
    assert (first.initialized, second.initialized) == (1, 1)


def test_draw_only_drawable_components_and_children():
    parent = Actor()
    child = Actor()
    parent.add_child(child)
    painter = Painter()
    painter.label = "parent"
    parent.add_component(painter)
    parent.add_component(Probe())
    child_painter = Painter()
    child_painter.label = "child"
    child.add_component(child_painter)
    drawn = []
    parent.draw(drawn)
    assert drawn == ["parent", "child"]


def test_inactive_actor_is_not_drawn():
    actor = Actor()
    actor.add_component(Painter())
    actor.active = False
    drawn = []
    actor.draw(drawn)
    assert drawn == []


def test_read_fields_transform_and_components(factory):
    actor = Actor()
    actor.read(
        {
            "tag": "Enemy",
            "name": "Bat",
            "m_Active": False,
            "LifeSpan": 2.5,
            "transform": {"Position": [3, 4]},
            "components": [{"type": "Probe", "label": "wing"}, {"type": "Unknown"}],
        }
    )
    assert actor.tag == "Enemy"
    assert actor.name == "Bat"
    assert actor.active is False
    assert actor.lifespan == 2.5
    assert actor.transform.position == Vector2(3, 4)
    assert len(actor.components) == 1
    assert actor.components[0].label == "wing"
    assert actor.components[0].owner is actor


def test_clone_copies_identity_and_components():
    actor = Actor(name="Coin", tag="Pickup")
    actor.lifespan = 4.0
    actor.scene = object()
    actor.active = False
    probe = Probe()
    probe.label = "shine"
    actor.add_component(probe)
    actor.add_child(Actor())
    duplicate = actor.clone()
    assert (duplicate.name, duplicate.tag, duplicate.lifespan) == ("Coin", "Pickup", 4.0)
    assert duplicate.scene is actor.scene
    assert duplicate.active is True
    assert duplicate.children == []
    assert duplicate.components[0] is not probe
    assert duplicate.components[0].label == "shine"
    assert duplicate.components[0].owner is duplicate


def test_destroy_marks_actor():
    actor = Actor()
    actor.destroy()
    assert actor.destroyed is True