[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connectn"
version = "0.1.0"
description = "Connect-N board game with configurable grid size and a minimax computer opponent"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["connect-four", "connect-n", "board-game", "minimax", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
connectn = "connectn.app:main"

[tool.hatch.build.targets.wheel]
packages = ["connectn"]

[tool.pytest.ini_options]
addopts = "-ra"
