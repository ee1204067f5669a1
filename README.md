# smbgame

Building blocks for a small side-scrolling, tile-based platformer, written
in plain Python with no third-party dependencies.

## Modules

- `smbgame.gmath` — `Vector2` and `Vector3` (mutable dataclasses with
  `+`, `-`, `*`, unary `-`, `length`, `length_sq`, `normalize`,
  `normalized`, and static `dot`, `lerp`, `reflect`; `Vector3.cross`), plus
  scalar helpers `to_radians`, `to_degrees`, `near_zero`, `clamp` and `lerp`.
- `smbgame.matrix` — `Matrix3` and `Matrix4` (row-major, identity by default,
  multiplied with `@`), `Quaternion` (`from_axis_angle`, `lerp`, `slerp`,
  `concatenate`, ...), and the transforms `transform_vector2`,
  `transform_vector3`, `transform_with_persp_div` and `rotate_by_quaternion`.
  `Matrix4.invert` raises `ValueError` for a singular matrix.
- `smbgame.rng` — a process-wide random source: `init`, `seed`, `get_float`,
  `get_float_range`, `get_int_range` (both ends included) and `get_vector`.
- `smbgame.component` — `Component`, the base for behaviour attached to an
  owner; it registers itself through `owner.add_component(self)`.
- `smbgame.rigid_body` — `RigidBodyComponent`: mass, friction and gravity
  (2000 units/s²), Euler integration, speed clamped to 750 on each axis, and
  axis-by-axis movement that asks the owner's box collider to resolve hits.
- `smbgame.colliders` — `ColliderLayer` (`PLAYER`, `ENEMY`, `BLOCKS`),
  `AABBColliderComponent` (boxes offset from the owner; touching edges do not
  intersect; static boxes never move themselves) and
  `CircleColliderComponent`.
- `smbgame.level` — `split` and `load_level` for CSV tile maps.

## Installing

```
pip install .
```

## Examples

```python
from smbgame.gmath import Vector2, clamp
from smbgame.matrix import Matrix3, transform_vector2
from smbgame import rng

v = Vector2(3.0, 4.0)
v.length()                     # 5.0
clamp(900.0, -750.0, 750.0)    # 750.0

m = Matrix3.create_translation(Vector2(10.0, 0.0)) @ Matrix3.create_uniform_scale(2.0)
transform_vector2(Vector2(1.0, 1.0), m)

rng.seed(42)
rng.get_int_range(1, 6)
```

Levels are CSV files with one row of integer tile codes per line:

```python
from smbgame.level import load_level, split

split("1,2,3")                       # [1, 2, 3]
tiles = load_level("level.csv", 215, 15)
```

`load_level` raises `OSError` if the file cannot be read and `ValueError` if a
line holds something other than integers, or the level has more rows or
columns than the given size.

## Owners of components

Components expect an owner object that provides:

- `add_component(component)` — called by every `Component` on construction;
- `game` — an object with a `colliders` list and `add_collider` /
  `remove_collider` methods (used by `AABBColliderComponent`);
- `position` — a `Vector2`, read and replaced by the physics and colliders;
- `get_component(cls)` — returns the owner's first component of `cls`, or
  `None`;
- `on_horizontal_collision(overlap, other)`,
  `on_vertical_collision(overlap, other)` and `set_on_ground()` — called when
  a box collider resolves a hit;
- `scale` — used by `CircleColliderComponent`.

## What this package does not do

It has no playable game: there is no window, rendering, input handling,
sprite animation, actor classes, level building or game loop, and no command
to start anything. It provides the math, randomness, physics, collision and
level-file pieces such a game is built from.

## Tests

```
pip install .[test]
pytest
```