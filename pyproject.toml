[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cribsim"
version = "0.1.0"
description = "A cribbage round simulator with pluggable hand and pegging strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["cribbage", "cards", "simulation", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cribsim = "cribsim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cribsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
