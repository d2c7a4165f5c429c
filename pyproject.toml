[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokered"
version = "0.1.0"
description = "A small top-down game skeleton with a prioritised event bus, a camera and delta timing, built on pygame"
requires-python = ">=3.10"
keywords = ["game", "pygame", "event-bus", "camera", "rpg"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pokered = "pokered.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pokered"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
