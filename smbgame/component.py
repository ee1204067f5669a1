"""Base class for behaviour attached to an actor."""

from __future__ import annotations

from typing import Any


class Component:
    """A piece of behaviour owned by an actor.

    Components with a lower ``update_order`` are updated earlier. A new
    component registers itself with its owner on construction.
    """

    def __init__(self, owner: Any, update_order: int = 100) -> None:
        self.owner = owner
        self.update_order = update_order
        self.enabled = True
        owner.add_component(self)

    @property
    def game(self) -> Any:
        """The game the owning actor belongs to."""
        return self.owner.game

    def update(self, delta_time: float) -> None:
        """Advance this component by ``delta_time`` seconds; the base does nothing."""

    def process_input(self, key_state: Any) -> None:
        """React to the current keyboard state; the base does nothing."""

    def remove(self) -> None:
        """Release what this component holds when its owner is destroyed."""
        self.enabled = False