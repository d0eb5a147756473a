"""Position, rotation and scale of an entity, relative to its parent."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from mage.components import Component
from mage.vectors import Vector3f


def _wrap_degrees(angle: float) -> float:
    while angle > 180:
        angle -= 360
    while angle < -180:
        angle += 360
    return angle


def snap_rotation(rotation: Vector3f) -> Vector3f:
    """Clamp pitch to [-89, 89] and wrap yaw and roll into [-180, 180]."""
    pitch = min(89.0, max(-89.0, rotation.x))
    return Vector3f(pitch, _wrap_degrees(rotation.y), _wrap_degrees(rotation.z))


def euler_to_forward(rotation: Vector3f) -> Vector3f:
    """Unit forward direction for a (pitch, yaw, roll) rotation in degrees."""
    pitch = math.radians(rotation.x)
    yaw = math.radians(rotation.y)
    forward = Vector3f(
        math.cos(yaw) * math.cos(pitch),
        math.sin(pitch),
        math.sin(yaw) * math.cos(pitch),
    )
    forward.normalise_in_place()
    return forward


@dataclass(eq=False)
class Transform(Component):
    """Local transform; rotation holds (pitch, yaw, roll) in degrees."""

    forward: Vector3f = field(default_factory=lambda: Vector3f(0, 0, 1))
    position: Vector3f = field(default_factory=Vector3f)
    scale: Vector3f = field(default_factory=lambda: Vector3f(1, 1, 1))
    rotation: Vector3f = field(default_factory=Vector3f)

    def update_direction(self) -> None:
        """Snap the rotation and recompute the forward direction from it."""
        self.rotation = snap_rotation(self.rotation)
        self.forward = euler_to_forward(self.rotation)

    def update_rotation(self, world: Any) -> None:
        """Approximate pitch and yaw from the forward direction."""
        self.rotation.x = self.forward.angle_between(world.world_up) - 90
        self.rotation.y = self.forward.angle_between(world.world_forward)

    def world_forward(self) -> Vector3f:
        return euler_to_forward(snap_rotation(self.world_rotation()))

    def world_position(self) -> Vector3f:
        parent = self._parent_transform()
        if parent is None:
            return self.position.copy()
        return self.position + parent.world_position()

    def world_scale(self) -> Vector3f:
        """Scale summed (not multiplied) up the parent chain."""
        parent = self._parent_transform()
        if parent is None:
            return self.scale.copy()
        return self.scale + parent.world_scale()

    def world_rotation(self) -> Vector3f:
        parent = self._parent_transform()
        if parent is None:
            return self.rotation.copy()
        return self.rotation + parent.world_rotation()

    def _parent_transform(self) -> Transform | None:
        parent = self.entity.parent
        if parent is None:
            return None
        transform = parent.get_component(Transform)
        if transform is None:
            raise LookupError("parent entity has no Transform")
        return transform