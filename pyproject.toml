[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubicore"
version = "0.1.0"
description = "Chart data model and music-timing conductor for rhythm games"
requires-python = ">=3.10"
dependencies = []
keywords = ["rhythm game", "chart", "bpm", "conductor", "timing"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rubicore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
