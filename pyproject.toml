[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ereea"
version = "0.1.0"
description = "Robot exploration simulation on a procedurally generated map"
requires-python = ">=3.10"
keywords = ["simulation", "robots", "perlin", "exploration", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ereea = "ereea.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ereea"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
