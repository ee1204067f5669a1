"""Simple rigid-body physics with gravity, friction and speed limits."""

from __future__ import annotations

from typing import Any

from .component import Component
from .gmath import Vector2, clamp, near_zero

MAX_SPEED_X = 750.0
MAX_SPEED_Y = 750.0
GRAVITY = 2000.0


class RigidBodyComponent(Component):
    """Moves its owner by integrating forces, and resolves collisions on the way."""

    def __init__(
        self,
        owner: Any,
        mass: float = 1.0,
        friction: float = 0.0,
        apply_gravity: bool = True,
        update_order: int = 10,
    ) -> None:
        super().__init__(owner, update_order)
        self.mass = mass
        self.friction = friction
        self.apply_gravity = apply_gravity
        self.velocity = Vector2(0.0, 0.0)
        self.acceleration = Vector2(0.0, 0.0)

    def apply_force(self, force: Vector2) -> None:
        """Add ``force`` divided by the mass to the acceleration for this step."""
        self.acceleration = self.acceleration + force * (1.0 / self.mass)

    def update(self, delta_time: float) -> None:
        """Integrate one step, moving the owner axis by axis and resolving collisions."""
        from .colliders import AABBColliderComponent

        if self.apply_gravity:
            self.apply_force(Vector2(0.0, GRAVITY))

        if abs(self.velocity.x) > 0.05:
            self.apply_force(Vector2(-self.friction * self.velocity.x, 0.0))

        velocity = self.velocity + self.acceleration * delta_time
        vx = clamp(velocity.x, -MAX_SPEED_X, MAX_SPEED_X)
        vy = clamp(velocity.y, -MAX_SPEED_Y, MAX_SPEED_Y)
        if near_zero(vx, 1.0):
            vx = 0.0
        self.velocity = Vector2(vx, vy)

        collider = self.owner.get_component(AABBColliderComponent)

        pos = self.owner.position
        self.owner.position = Vector2(pos.x + self.velocity.x * delta_time, pos.y)
        if collider is not None:
            collider.detect_horizontal_collision(self)

        pos = self.owner.position
        self.owner.position = Vector2(pos.x, pos.y + self.velocity.y * delta_time)
        if collider is not None:
            collider.detect_vertical_collision(self)

        self.acceleration = Vector2(0.0, 0.0)