"""Entities: containers of components arranged in a parent/child tree."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, TypeVar

import numpy as np

from mage import glmath
from mage.components import BoxCollider, Component, PlaneCollider, SphereCollider
from mage.transform import Transform

C = TypeVar("C", bound=Component)


class ColliderType(Enum):
    NONE = 0
    SPHERE = 1
    PLANE = 2
    BOX = 3


class Entity:
    """A game object; its behaviour comes from the components attached to it."""

    def __init__(self, active: bool = True, parent: Entity | None = None) -> None:
        self.active = active
        self.parent = parent
        self.children: list[Entity] = []
        self._components: list[Component] = []

    def __repr__(self) -> str:
        kinds = ", ".join(type(c).__name__ for c in self._components)
        return f"Entity(active={self.active}, components=[{kinds}])"

    def get_component(self, kind: type[C]) -> C | None:
        """The first component that is an instance of ``kind``, or None."""
        return next((c for c in self._components if isinstance(c, kind)), None)

    def get_components(self, kind: type[C]) -> list[C]:
        return [c for c in self._components if isinstance(c, kind)]

    def add_component(self, kind: type[C]) -> C:
        """Create a component of ``kind`` owned by this entity and return it."""
        if not (isinstance(kind, type) and issubclass(kind, Component)):
            raise TypeError(f"{kind!r} is not a Component type")
        component = kind(self)
        self._components.append(component)
        return component

    def update(self, world: Any) -> None:
        for component in self._components:
            component.update(world)

    def fixed_update(self, world: Any) -> None:
        for component in self._components:
            component.fixed_update(world)

    def on_collision_enter(self, world: Any, data: Any) -> None:
        for component in self._components:
            component.on_collision_enter(world, data)

    def create_child(self, active: bool) -> Entity:
        child = Entity(active, parent=self)
        self.children.append(child)
        return child

    def collider(self) -> ColliderType:
        """The collider kind, preferring sphere, then plane, then box."""
        if self.get_component(SphereCollider) is not None:
            return ColliderType.SPHERE
        if self.get_component(PlaneCollider) is not None:
            return ColliderType.PLANE
        if self.get_component(BoxCollider) is not None:
            return ColliderType.BOX
        return ColliderType.NONE

    def transform_matrix_2d(self, screen_width: float, screen_height: float) -> np.ndarray:
        """Model matrix placing a unit quad in screen pixels onto normalised device space."""
        transform = self._require_transform()
        position = transform.world_position()
        rotation = transform.world_rotation()
        size = transform.world_scale()
        mesh_x = 1 / screen_width
        mesh_y = 1 / screen_height
        matrix = glmath.translate(
            glmath.identity(),
            (
                (position.x / screen_width) * 2 - 1,
                (position.y / screen_height) * 2 - 1,
                position.z,
            ),
        )
        matrix = glmath.rotate(matrix, math.radians(rotation.x), (1, 0, 0))
        matrix = glmath.rotate(matrix, math.radians(rotation.y), (0, 1, 0))
        matrix = glmath.rotate(matrix, math.radians(rotation.z), (0, 0, 1))
        # Depth is scaled by the y scale, as the renderer has always done.
        return glmath.scale(matrix, (mesh_x * size.x, mesh_y * size.y, size.y))

    def transform_matrix_3d(self) -> np.ndarray:
        """Model matrix: translate, rotate about z, y then x, then scale."""
        transform = self._require_transform()
        position = transform.world_position()
        rotation = transform.world_rotation()
        size = transform.world_scale()
        matrix = glmath.translate(glmath.identity(), position)
        matrix = glmath.rotate(matrix, math.radians(rotation.z), (0, 0, 1))
        matrix = glmath.rotate(matrix, math.radians(rotation.y), (0, 1, 0))
        matrix = glmath.rotate(matrix, math.radians(rotation.x), (1, 0, 0))
        return glmath.scale(matrix, size)

    def _require_transform(self) -> Transform:
        transform = self.get_component(Transform)
        if transform is None:
            raise LookupError("entity has no Transform")
        return transform