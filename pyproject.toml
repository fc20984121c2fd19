[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termplt"
version = "0.1.0"
description = "Draw images and coloured squares in terminals that speak the kitty graphics protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "kitty", "graphics", "images", "ansi", "escape-sequences"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termplt = "termplt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termplt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
