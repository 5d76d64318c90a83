"""Building blocks for a voxel game engine: boxes, camera, chunks, bitmaps, geometry and UI."""

__version__ = "0.1.0"
__all__ = [
    "aabb",
    "block",
    "bmp",
    "boxes",
    "camera",
    "chunk",
    "event",
    "geometry",
    "page_ui",
    "ui",
]