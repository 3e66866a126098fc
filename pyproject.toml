[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mohrechess"
version = "0.1.0"
description = "Two-player chess board with move hints for mate threats, read from a text position"
requires-python = ">=3.10"
keywords = ["chess", "board game", "pygame", "two player", "mate search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mohrechess = "mohrechess.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["mohrechess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
