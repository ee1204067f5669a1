"""Vectors, matrices, randomness, physics, colliders and level loading for a tile platformer."""

__version__ = "0.1.0"