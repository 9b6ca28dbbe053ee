[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filsdefer"
version = "0.1.0"
description = "Wireframe viewer for .fdf height maps with isometric projection and keyboard rotation"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["fdf", "wireframe", "heightmap", "isometric", "bresenham", "viewer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdf = "filsdefer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["filsdefer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
