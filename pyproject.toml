[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravitron"
version = "0.1.0"
description = "A gravity-flipping platformer: walk through connected rooms, dodge spikes and enemies, and check your progress on a sliding map."
requires-python = ">=3.10"
keywords = ["game", "platformer", "gravity", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
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
gravitron = "gravitron.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gravitron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
