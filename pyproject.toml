[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sunlife"
version = "0.1.0"
description = "A cellular automaton seeded with a sun pattern, shown in a window and recorded to an animated GIF"
requires-python = ">=3.10"
keywords = ["game-of-life", "cellular-automaton", "gif", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sunlife = "sunlife.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sunlife"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
