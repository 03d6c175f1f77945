[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catdefense"
version = "0.1.0"
description = "Engine core for a small 2D game on pygame: vectors, collision helpers, object groups, scenes, resource caching, audio and a game loop."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "pygame", "2d", "scenes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["catdefense"]

[tool.pytest.ini_options]
addopts = "-ra"
