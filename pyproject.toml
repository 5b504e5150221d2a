[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilegui"
version = "0.1.0"
description = "An immediate-mode GUI for pygame drawn on a grid of fixed-size cells, with atlas tiles, panels and box layouts"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gui", "immediate-mode", "tiles", "grid", "pixel-art", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilegui-demo = "tilegui.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tilegui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
