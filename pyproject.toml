[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mjengine"
version = "0.1.0"
description = "A small component-based 2D game engine on pygame with scenes, layers, sprite animation and keyboard input"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "sprite", "animation", "pygame", "components", "scenes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mjengine = "mjengine.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["mjengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
