from dataclasses import dataclass, field

import numpy as np
import pytest

from mage.components import (
    BoxCollider,
    Camera,
    Component,
    PlaneCollider,
    RigidBody,
    SphereCollider,
)
from mage.entity import ColliderType, Entity
from mage.transform import Transform
from mage.vectors import Vector3f


@dataclass(eq=False)
class _Recorder(Component):
    calls: list = field(default_factory=list)

    def update(self, world):
        self.calls.append(("update", world))

    def fixed_update(self, world):
        self.calls.append(("fixed", world))

    def on_collision_enter(self, world, data):
        self.calls.append(("collision", world, data))


def test_new_entity_state():
    entity = Entity(False)
    assert entity.active is False
    assert entity.parent is None
    assert entity.children == []


def test_add_and_get_component():
    entity = Entity()
    camera = entity.add_component(Camera)
    assert entity.get_component(Camera) is camera
    assert entity.get_component(RigidBody) is None


def test_get_components_by_base_class_in_order():
    entity = Entity()
    first = entity.add_component(Camera)
    second = entity.add_component(Transform)
    third = entity.add_component(Camera)
    assert entity.get_components(Component) == [first, second, third]
    assert entity.get_components(Camera) == [first, third]


def test_add_component_rejects_non_components():
    with pytest.raises(TypeError):
        Entity().add_component(Vector3f)
    with pytest.raises(TypeError):
        Entity().add_component("Camera")


def test_update_hooks_reach_every_component():
    entity = Entity()
    a = entity.add_component(_Recorder)
    b = entity.add_component(_Recorder)
    world, data = object(), object()
    entity.update(world)
    entity.fixed_update(world)
    entity.on_collision_enter(world, data)
    expected = [("update", world), ("fixed", world), ("collision", world, data)]
    assert a.calls == expected
    assert b.calls == expected


def test_create_child_links_both_ways():
    parent = Entity()
    child = parent.create_child(False)
    assert child.parent is parent
    assert child.active is False
    assert parent.children == [child]


@pytest.mark.parametrize(
    "kinds,expected",
    [
        ([], ColliderType.NONE),
        ([BoxCollider], ColliderType.BOX),
        ([BoxCollider, PlaneCollider], ColliderType.PLANE),
        ([BoxCollider, PlaneCollider, SphereCollider], ColliderType.SPHERE),
        ([Camera], ColliderType.NONE),
    ],
)
def test_collider_priority(kinds, expected):
    entity = Entity()
    for kind in kinds:
        entity.add_component(kind)
    assert entity.collider() is expected


def test_matrix_3d_without_rotation_is_translate_and_scale():
    entity = Entity()
    t = entity.add_component(Transform)
    t.position = Vector3f(1, 2, 3)
    t.scale = Vector3f(2, 3, 4)
    m = entity.transform_matrix_3d()
    assert np.allclose(m[:3, 3], list(t.position))
    assert np.allclose(np.diag(m)[:3], list(t.scale))


def test_matrix_3d_translation_is_independent_of_rotation():
    entity = Entity()
    t = entity.add_component(Transform)
    t.position = Vector3f(-4, 5, 6)
    t.rotation = Vector3f(30, 60, 90)
    m = entity.transform_matrix_3d()
    assert np.allclose(m[:3, 3], list(t.position))
    rotation_part = m[:3, :3]
    assert np.allclose(rotation_part @ rotation_part.T, np.eye(3))


def test_matrix_3d_uses_world_position():
    parent = Entity()
    parent.add_component(Transform).position = Vector3f(10, 0, 0)
    child = parent.create_child(True)
    child.add_component(Transform).position = Vector3f(1, 1, 1)
    m = child.transform_matrix_3d()
    assert np.allclose(m[:3, 3], list(child.get_component(Transform).world_position()))


def test_matrix_2d_centre_of_screen_maps_to_origin():
    width, height = 640, 480
    entity = Entity()
    t = entity.add_component(Transform)
    t.position = Vector3f(width / 2, height / 2, 0)
    t.scale = Vector3f(160, 120, 1)
    m = entity.transform_matrix_2d(width, height)
    assert np.allclose(m[:3, 3], 0)
    assert m[0, 0] == pytest.approx(t.scale.x / width)
    assert m[1, 1] == pytest.approx(t.scale.y / height)
    assert m[2, 2] == pytest.approx(t.scale.y)


def test_matrices_need_a_transform():
    entity = Entity()
    with pytest.raises(LookupError):
        entity.transform_matrix_3d()
    with pytest.raises(LookupError):
        entity.transform_matrix_2d(640, 480)