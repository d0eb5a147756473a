"""Collision detection and response for spheres, planes and axis-aligned boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mage.components import BoxCollider, Component, PlaneCollider, RigidBody, SphereCollider
from mage.entity import ColliderType, Entity
from mage.transform import Transform
from mage.vectors import Vector3f

_COMPASS = (
    Vector3f(1, 0, 0),
    Vector3f(0, 1, 0),
    Vector3f(0, 0, 1),
    Vector3f(-1, 0, 0),
    Vector3f(0, -1, 0),
    Vector3f(0, 0, -1),
)


def _direction(vector: Vector3f) -> Vector3f:
    """Unit vector along ``vector``, or the zero vector if it has no length."""
    if vector.length() == 0:
        return Vector3f()
    return vector.normalised()


def _transform(component: Component) -> Transform:
    transform = component.entity.get_component(Transform)
    if transform is None:
        raise LookupError(f"{type(component).__name__} entity has no Transform")
    return transform


@dataclass
class CollisionData:
    """The outcome of one collision test."""

    has_collided: bool
    penetration_depth: float = 0.0
    collision_normal: Vector3f = field(default_factory=Vector3f)
    collided_entity: Entity | None = None


def _miss() -> CollisionData:
    return CollisionData(False, 0.0, Vector3f())


class Physics:
    """Integrates rigid bodies and resolves their collisions."""

    def __init__(self, gravity: float = 0.009, velocity_dropoff: float = 0.98) -> None:
        self.gravity = gravity
        self.velocity_dropoff = velocity_dropoff
        self.compass = [direction.copy() for direction in _COMPASS]

    def apply_forces(self, world: Any, body: RigidBody) -> None:
        """Add forces and gravity to the velocity, damp it, and move the body."""
        body.velocity += (
            body.force + body.impulse_force + world.world_up * -self.gravity
        ) / body.mass
        body.impulse_force = Vector3f()
        body.velocity *= self.velocity_dropoff
        _transform(body).position += body.velocity

    def handle_collisions(self, entity: Entity, world: Any) -> None:
        if entity.collider() is ColliderType.NONE:
            return
        data = self.detect_collision(entity, world)
        if not data.has_collided:
            return
        entity.on_collision_enter(world, data)
        body = entity.get_component(RigidBody)
        if body is not None:
            self.collision_response(body, data)

    def detect_collision(self, entity: Entity, world: Any) -> CollisionData:
        """The first collision of ``entity`` with another active entity in ``world``."""
        kind = entity.collider()
        for other in world.entities:
            other_kind = other.collider()
            if other_kind is ColliderType.NONE or other is entity or not other.active:
                continue
            data = self._test_pair(entity, kind, other, other_kind)
            if data is not None and data.has_collided:
                return data
        return _miss()

    def _test_pair(
        self, entity: Entity, kind: ColliderType, other: Entity, other_kind: ColliderType
    ) -> CollisionData | None:
        if kind is ColliderType.SPHERE:
            sphere = entity.get_component(SphereCollider)
            if other_kind is ColliderType.SPHERE:
                return self.sphere_sphere(sphere, other.get_component(SphereCollider))
            if other_kind is ColliderType.BOX:
                return self.sphere_box(sphere, other.get_component(BoxCollider), False)
            if other_kind is ColliderType.PLANE:
                return self.sphere_plane(sphere, other.get_component(PlaneCollider))
        elif kind is ColliderType.BOX:
            box = entity.get_component(BoxCollider)
            if other_kind is ColliderType.SPHERE:
                return self.sphere_box(other.get_component(SphereCollider), box, True)
            if other_kind is ColliderType.PLANE:
                return self.box_plane(box, other.get_component(PlaneCollider))
            if other_kind is ColliderType.BOX:
                return self.box_box(box, other.get_component(BoxCollider))
        return None

    def sphere_sphere(
        self, collider1: SphereCollider, collider2: SphereCollider
    ) -> CollisionData:
        position1 = _transform(collider1).position
        position2 = _transform(collider2).position
        between = (position1 + collider1.center) - (position2 + collider2.center)
        reach = collider1.radius + collider2.radius
        if between.length() < reach:
            normal = _direction(position1 - position2)
            return CollisionData(True, reach - between.length(), normal)
        return _miss()

    def sphere_plane(self, collider1: SphereCollider, collider2: PlaneCollider) -> CollisionData:
        between = (_transform(collider1).position + collider1.center) - (
            _transform(collider2).position + collider2.position
        )
        normal = collider2.normal.copy()
        distance = between.dot(normal)
        if distance < collider1.radius:
            return CollisionData(True, abs(collider1.radius - distance), normal)
        return _miss()

    def closest_edge_box(self, point: Vector3f, box: BoxCollider) -> tuple[int, float]:
        """Index of the compass direction nearest ``point`` and the depth past that face."""
        direction = _direction(point)
        index = 0
        closest = 0.0
        for candidate, edge in enumerate(self.compass):
            alignment = edge.dot(direction)
            if alignment > closest:
                closest = alignment
                index = candidate
        edge = self.compass[index]
        if index < 3:
            edge_point = edge * box.max_dimensions
        else:
            edge_point = (edge * -1) * box.min_dimensions
        depth = (edge * -1).dot(point - edge_point)
        return index, depth

    def sphere_box(
        self, collider1: SphereCollider, collider2: BoxCollider, inverted: bool
    ) -> CollisionData:
        """Sphere against box; with ``inverted`` the normal points from sphere to box."""
        position1 = _transform(collider1).position
        position2 = _transform(collider2).position
        facing = _direction(position2 - position1)
        closest = (position1 + facing * collider1.radius) - position2
        low, high = collider2.min_dimensions, collider2.max_dimensions
        inside = all(
            lo < value < hi for value, lo, hi in zip(closest, low, high)
        )
        if not inside:
            return _miss()
        index, depth = self.closest_edge_box(closest, collider2)
        normal = _direction(position2 - position1) if inverted else self.compass[index].copy()
        return CollisionData(True, depth, normal, collider2.entity)

    def box_box(self, collider1: BoxCollider, collider2: BoxCollider) -> CollisionData:
        between = _transform(collider1).position - _transform(collider2).position
        min_dims = collider1.min_dimensions + between
        max_dims = collider1.max_dimensions + between
        low = Vector3f(*(min(a, b) for a, b in zip(collider2.max_dimensions, min_dims)))
        high = Vector3f(*(max(a, b) for a, b in zip(collider2.min_dimensions, max_dims)))
        if not (high > collider2.min_dimensions and low < collider2.max_dimensions):
            return _miss()
        index, depth = self.closest_edge_box(between, collider2)
        edge = self.compass[index]
        for axis in ("x", "y", "z"):
            if getattr(edge, axis) != 0:
                if getattr(between, axis) >= 0:
                    depth = edge.dot(collider2.max_dimensions - min_dims)
                else:
                    depth = (edge * -1).dot(max_dims - collider2.min_dimensions)
                break
        return CollisionData(True, abs(depth), edge.copy(), collider2.entity)

    def box_plane(self, collider1: BoxCollider, collider2: PlaneCollider) -> CollisionData:
        """Box against plane, tested as the sphere that spans the box along the normal."""
        probe = Entity(True)
        probe.add_component(Transform)
        sphere = SphereCollider(probe)
        extent = (collider1.max_dimensions - collider1.min_dimensions) / 2.0
        sphere.center = (_transform(collider1).position + collider1.min_dimensions) + extent
        normal = collider2.normal
        sphere.radius = (
            abs(normal.x * extent.x) + abs(normal.y * extent.y) + abs(normal.z * extent.z)
        )
        return self.sphere_plane(sphere, collider2)

    def collision_response(self, body: RigidBody, data: CollisionData) -> None:
        """Push the body out along the normal and bounce its velocity."""
        transform = _transform(body)
        transform.position = transform.position + data.collision_normal * data.penetration_depth
        body.velocity = body.velocity.reflect(data.collision_normal) * body.restitution