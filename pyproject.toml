[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warsim"
version = "0.1.0"
description = "Building blocks for a melee combat damage simulator: statistics, timing, hit tables, rage, damage accounting and gear."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "combat", "damage", "statistics", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["warsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
