[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubwalk"
version = "0.1.0"
description = "A small raycasting first-person walker over a textured tile map, with the string, memory and list helpers it is built on"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "first-person", "xpm", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubwalk = "cubwalk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubwalk"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
