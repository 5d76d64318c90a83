"""Find solid-coloured rectangles marked in a BMP image."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from voxelkit.bmp import Bitmap, BitmapError, PathLike

DEFAULT_BOX_COLOR = (0, 255, 255)


@dataclass(frozen=True)
class Box:
    """A marked rectangle: top-left corner and its measured extent."""

    x: int
    y: int
    width: int
    height: int

    def __str__(self) -> str:
        return f"x: {self.x}, y: {self.y}, width: {self.width}, height: {self.height}"


def _run_length(line: np.ndarray) -> int:
    if line.all():
        return int(line.size)
    return int(np.argmin(line))


def _scan(bitmap: Bitmap, box_color: Sequence[int]) -> List[Box]:
    rgba = np.frombuffer(bitmap.raw_data(), dtype=np.uint8).reshape(
        bitmap.height, bitmap.width, 4
    )[::-1]
    mask = np.all(rgba[..., :3].astype(int) == np.array(list(box_color), dtype=int), axis=-1)

    left_clear = np.ones_like(mask)
    left_clear[:, 1:] = ~mask[:, :-1]
    top_clear = np.ones_like(mask)
    top_clear[1:, :] = ~mask[:-1, :]
    corners = mask & left_clear & top_clear

    boxes = []
    # Column by column, top to bottom within each column.
    for x, y in np.argwhere(corners.T):
        width = _run_length(mask[y, x:]) + 1
        height = _run_length(mask[y:, x]) + 1
        boxes.append(Box(int(x), int(y), width, height))
    return boxes


def find_boxes(path: PathLike, box_color: Sequence[int] = DEFAULT_BOX_COLOR) -> List[Box]:
    """Return the boxes drawn in ``box_color`` (RGB) in the BMP at ``path``.

    A box starts at a matching pixel with no matching pixel to its left or
    above. Its width and height are the runs of matching pixels along its top
    row and left column, each plus one.
    """
    return _scan(Bitmap.load(path), box_color)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the size of a BMP image and the boxes marked in it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error: No filename given!")
        return 1
    try:
        bitmap = Bitmap.load(args[0])
    except BitmapError as exc:
        print(exc)
        return 1
    print(f"Width: {bitmap.width}\nHeight: {bitmap.height}")
    for box in _scan(bitmap, DEFAULT_BOX_COLOR):
        print(box)
    return 0


if __name__ == "__main__":
    sys.exit(main())