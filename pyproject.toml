[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smbgame"
version = "0.1.0"
description = "Building blocks for a tile-based platformer: vectors, matrices, a seedable random source, rigid-body physics, AABB and circle colliders, and CSV level loading."
requires-python = ">=3.10"
keywords = ["game", "platformer", "physics", "aabb", "collision", "tilemap", "vector", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["smbgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
