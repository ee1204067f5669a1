"""Axis-aligned box and circle colliders."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .component import Component
from .gmath import Vector2
from .rigid_body import RigidBodyComponent


class ColliderLayer(Enum):
    """What kind of object a collider belongs to."""

    PLAYER = "player"
    ENEMY = "enemy"
    BLOCKS = "blocks"


class AABBColliderComponent(Component):
    """An axis-aligned box offset from its owner's position.

    The collider registers itself with the owner's game on construction.
    Static colliders never move themselves out of other colliders.
    """

    def __init__(
        self,
        owner: Any,
        dx: int,
        dy: int,
        w: int,
        h: int,
        layer: ColliderLayer,
        is_static: bool = False,
        update_order: int = 10,
    ) -> None:
        super().__init__(owner, update_order)
        self.offset = Vector2(float(int(dx)), float(int(dy)))
        self.width = int(w)
        self.height = int(h)
        self.layer = layer
        self.is_static = is_static
        self.owner.game.add_collider(self)

    def remove(self) -> None:
        """Unregister from the game."""
        super().remove()
        self.owner.game.remove_collider(self)

    def get_min(self) -> Vector2:
        """Top-left corner in world coordinates."""
        return self.offset + self.owner.position

    def get_max(self) -> Vector2:
        """Bottom-right corner in world coordinates."""
        return Vector2(float(self.width), float(self.height)) + self.get_min()

    def intersect(self, other: AABBColliderComponent) -> bool:
        """True if the boxes overlap; touching edges do not count."""
        a_min, a_max = self.get_min(), self.get_max()
        b_min, b_max = other.get_min(), other.get_max()
        return not (
            a_max.x <= b_min.x
            or b_max.x <= a_min.x
            or a_max.y <= b_min.y
            or b_max.y <= a_min.y
        )

    def min_vertical_overlap(self, other: AABBColliderComponent) -> float:
        """Signed vertical overlap with the smaller magnitude (positive: from above)."""
        top = self.get_min().y - other.get_max().y
        down = self.get_max().y - other.get_min().y
        return top if abs(top) < abs(down) else down

    def min_horizontal_overlap(self, other: AABBColliderComponent) -> float:
        """Signed horizontal overlap with the smaller magnitude (positive: from the left)."""
        left = self.get_min().x - other.get_max().x
        right = self.get_max().x - other.get_min().x
        return right if abs(right) < abs(left) else left

    def _colliders(self):
        return [
            c for c in list(self.owner.game.colliders) if c.enabled and c is not self
        ]

    def _body(self, rigid_body: RigidBodyComponent) -> RigidBodyComponent:
        return self.owner.get_component(RigidBodyComponent) or rigid_body

    def detect_horizontal_collision(self, rigid_body: RigidBodyComponent) -> float:
        """Resolve the first horizontal hit and return its overlap, or 0.0."""
        if self.is_static:
            return 0.0
        for collider in self._colliders():
            if self.intersect(collider):
                overlap = self.min_horizontal_overlap(collider)
                self._resolve_horizontal(rigid_body, overlap)
                self.owner.on_horizontal_collision(overlap, collider)
                return overlap
        return 0.0

    def detect_vertical_collision(self, rigid_body: RigidBodyComponent) -> float:
        """Resolve the first vertical hit and return its overlap, or 0.0."""
        if self.is_static:
            return 0.0
        for collider in self._colliders():
            if self.intersect(collider):
                overlap = self.min_vertical_overlap(collider)
                self._resolve_vertical(rigid_body, overlap)
                self.owner.on_vertical_collision(overlap, collider)
                return overlap
        return 0.0

    def _resolve_horizontal(self, rigid_body: RigidBodyComponent, overlap: float) -> None:
        pos = self.owner.position
        self.owner.position = Vector2(pos.x - overlap, pos.y)
        body = self._body(rigid_body)
        body.velocity = Vector2(0.0, body.velocity.y)

    def _resolve_vertical(self, rigid_body: RigidBodyComponent, overlap: float) -> None:
        pos = self.owner.position
        self.owner.position = Vector2(pos.x, pos.y - overlap)
        body = self._body(rigid_body)
        body.velocity = Vector2(body.velocity.x, 0.0)
        if overlap > 0:
            self.owner.set_on_ground()


class CircleColliderComponent(Component):
    """A circle centred on its owner, scaled by the owner's scale."""

    def __init__(self, owner: Any, radius: float, update_order: int = 10) -> None:
        super().__init__(owner, update_order)
        self.radius = radius

    @property
    def scaled_radius(self) -> float:
        """Radius after applying the owner's scale."""
        return self.owner.scale * self.radius

    @property
    def center(self) -> Vector2:
        """Centre of the circle: the owner's position."""
        return self.owner.position

    def intersect(self, other: CircleColliderComponent) -> bool:
        """True if the circles overlap or touch."""
        dist_sq = (self.center - other.center).length_sq()
        radii = self.scaled_radius + other.scaled_radius
        return dist_sq <= radii * radii