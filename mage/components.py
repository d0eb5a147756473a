"""Components that give an entity its behaviour and data."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mage.vectors import Vector3f

if TYPE_CHECKING:
    from mage.entity import Entity

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Component:
    """Base of every component; owned by exactly one entity."""

    entity: Entity = field(repr=False)

    def update(self, world: Any) -> None:
        """Called once per frame while the owning entity is active."""

    def fixed_update(self, world: Any) -> None:
        """Called on the fixed time step."""

    def on_collision_enter(self, world: Any, data: Any) -> None:
        """Called when the owning entity collides with another."""


@dataclass(eq=False)
class Camera(Component):
    """A viewpoint; the field of view is in degrees."""

    field_of_view: float = 90.0


@dataclass(eq=False)
class BoxCollider(Component):
    """An axis-aligned box given by its extents around the entity's position."""

    center: Vector3f = field(default_factory=Vector3f)
    min_dimensions: Vector3f = field(default_factory=Vector3f)
    max_dimensions: Vector3f = field(default_factory=Vector3f)


@dataclass(eq=False)
class PlaneCollider(Component):
    """An infinite plane through ``position`` (relative to the entity) with ``normal``."""

    normal: Vector3f = field(default_factory=lambda: Vector3f(1, 0, 0))
    position: Vector3f = field(default_factory=Vector3f)


@dataclass(eq=False)
class SphereCollider(Component):
    """A sphere of ``radius`` around ``center`` (relative to the entity)."""

    radius: float = 0.5
    center: Vector3f = field(default_factory=Vector3f)


@dataclass(eq=False)
class PointLight(Component):
    intensity: Vector3f = field(default_factory=Vector3f)
    position: Vector3f = field(default_factory=Vector3f)
    radius: float = 0.0


@dataclass(eq=False)
class SpotLight(Component):
    intensity: Vector3f = field(default_factory=Vector3f)
    position: Vector3f = field(default_factory=Vector3f)
    field_of_view: float = 0.0
    range: float = 0.0


@dataclass(eq=False)
class RigidBody(Component):
    """A body moved by the world's physics each frame."""

    mass: float = 1.0
    restitution: float = 0.9
    velocity: Vector3f = field(default_factory=Vector3f)
    force: Vector3f = field(default_factory=Vector3f)
    impulse_force: Vector3f = field(default_factory=Vector3f)

    def update(self, world: Any) -> None:
        """Integrate forces, then resolve collisions, using ``world.physics``."""
        world.physics.apply_forces(world, self)
        world.physics.handle_collisions(self.entity, world)


@dataclass(eq=False)
class RemoteClient(Component):
    """Marks an entity as the avatar of another networked player."""

    id: int = -1

    def update(self, world: Any) -> None:
        # Imported here because the transform module builds on this one.
        from mage.transform import Transform

        transform = self.entity.get_component(Transform)
        if transform is None:
            raise LookupError("remote client entity has no Transform")
        position = transform.position
        logger.info(
            "client : %d position : %s %s %s",
            self.id,
            position.x,
            position.y,
            position.z,
        )


@dataclass(eq=False)
class Mesh(Component):
    """A drawable mesh, referring to mesh, texture and shader by name."""

    is_3d: bool = True
    mesh_name: str = ""
    texture_name: str = ""
    shader_name: str = ""

    def update(self, world: Any) -> None:
        """Hand this mesh and its model matrix to ``world.draw_3d`` or ``world.draw_2d``."""
        if self.is_3d:
            world.draw_3d(self, self.entity.transform_matrix_3d())
        else:
            matrix = self.entity.transform_matrix_2d(world.screen_width, world.screen_height)
            world.draw_2d(self, matrix)