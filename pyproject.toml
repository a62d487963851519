[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rastergraph"
version = "0.1.0"
description = "A small software rasterizer that draws lines, curves and lit 3D shapes from a drawing script"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "rasterizer", "z-buffer", "bresenham", "ppm", "3d", "scanline"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rastergraph = "rastergraph.script:main"

[tool.hatch.build.targets.wheel]
packages = ["rastergraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
