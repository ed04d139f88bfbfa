[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrolltile"
version = "0.1.0"
description = "Building blocks for a scrollable tiling layout: geometry, options, outputs, animations, focus rings and tiles"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiling", "window-manager", "layout", "scrollable", "focus-ring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scrolltile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
