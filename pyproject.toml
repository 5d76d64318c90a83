[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "voxelkit"
version = "0.1.0"
description = "Building blocks for a voxel game engine: bounding boxes, cameras, chunks, bitmaps, mesh tables and simple UI."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["voxel", "game", "engine", "aabb", "bitmap", "bmp", "chunk", "camera"]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
voxelkit-boxes = "voxelkit.boxes:main"

[tool.setuptools.packages.find]
include = ["voxelkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
