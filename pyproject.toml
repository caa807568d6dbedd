[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankbattle"
version = "0.1.0"
description = "Board, pieces and a scripted tank algorithm for a two-player tank battle on a wrapping grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "tanks", "grid", "turn-based", "pathfinding"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tankbattle"]

[tool.pytest.ini_options]
addopts = "-ra"
