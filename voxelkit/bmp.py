"""Uncompressed 24-bit BMP images held as RGBA pixels."""

from __future__ import annotations

import os
import struct
from typing import Sequence, Tuple, Union

import numpy as np

PathLike = Union[str, "os.PathLike[str]"]
Color = Tuple[int, int, int, int]

HEADER_SIZE = 54
INFO_HEADER_SIZE = 40
BITS_PER_PIXEL = 24
NO_COLOR_KEY = (-1, -1, -1)


class BitmapError(ValueError):
    """Raised when a file is not a BMP image this module can read."""


def _row_size(width: int) -> int:
    """Bytes in one stored row: three per pixel, padded to a multiple of four."""
    return (3 * width + 3) // 4 * 4


def _read_int(content: bytes, offset: int) -> int:
    return struct.unpack_from("<i", content, offset)[0]


class Bitmap:
    """An RGBA image addressed from its top-left corner.

    Pixels are kept bottom row first, the order a BMP file stores them in and
    the order :meth:`raw_data` and :meth:`premultiplied` return them in.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"bad bitmap dimensions {width}x{height}")
        self._pixels = np.zeros((height, width, 4), dtype=np.uint8)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def __repr__(self) -> str:
        return f"Bitmap({self.width}, {self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(
            np.array_equal(self._pixels, other._pixels)
        )

    @property
    def _top_down(self) -> np.ndarray:
        return self._pixels[::-1]

    @classmethod
    def load(cls, path: PathLike, color_key: Sequence[int] = NO_COLOR_KEY) -> "Bitmap":
        """Read a 24-bit uncompressed BMP file.

        Pixels whose RGB equals ``color_key`` become fully transparent; all
        others are opaque.
        """
        try:
            with open(path, "rb") as handle:
                content = handle.read()
        except OSError as exc:
            raise BitmapError(f"{os.fspath(path)} could not be opened") from exc
        return cls._parse(content, color_key)

    @classmethod
    def _parse(cls, content: bytes, color_key: Sequence[int]) -> "Bitmap":
        if len(content) < HEADER_SIZE or content[:2] != b"BM":
            raise BitmapError("Not a correct BMP file")
        if _read_int(content, 0x1E) != 0:
            raise BitmapError("Not a correct BMP file: compressed data")
        if _read_int(content, 0x1C) != BITS_PER_PIXEL:
            raise BitmapError("Not a correct BMP file: not 24 bits per pixel")

        data_pos = _read_int(content, 0x0A)
        image_size = _read_int(content, 0x22)
        width = _read_int(content, 0x12)
        height = _read_int(content, 0x16)
        if width < 0 or height < 0:
            raise BitmapError(f"unsupported dimensions {width}x{height}")

        if image_size == 0:
            image_size = width * height * 3
        if data_pos == 0:
            data_pos = HEADER_SIZE
        if image_size < width * height * 3:
            raise BitmapError(f"Not enough space! {image_size} for {width}x{height}")

        raw = content[data_pos : data_pos + image_size]
        if len(raw) != image_size:
            raise BitmapError(f"Bad read of {image_size} bytes")

        line_size = _row_size(width)
        needed = line_size * (height - 1) + 3 * width if height else 0
        if len(raw) < needed:
            raise BitmapError(f"pixel data too short for {width}x{height}")
        full = raw[: line_size * height].ljust(line_size * height, b"\0")
        rows = np.frombuffer(full, dtype=np.uint8).reshape(height, line_size)
        bgr = rows[:, : 3 * width].reshape(height, width, 3)
        rgb = bgr[..., ::-1]

        key = np.array(list(color_key), dtype=int)
        keyed = np.all(rgb.astype(int) == key, axis=-1)
        alpha = np.where(keyed, 0, 255).astype(np.uint8)

        bitmap = cls(width, height)
        bitmap._pixels[..., :3] = rgb
        bitmap._pixels[..., 3] = alpha
        return bitmap

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"invalid pixel ({x}, {y}) when dimensions are ({self.width}, {self.height})"
            )

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the (r, g, b, a) pixel at column ``x``, row ``y`` from the top."""
        self._check_bounds(x, y)
        r, g, b, a = self._top_down[y, x]
        return (int(r), int(g), int(b), int(a))

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        """Set the pixel at (``x``, ``y``) to the (r, g, b, a) ``color``."""
        self._check_bounds(x, y)
        r, g, b, a = color
        self._top_down[y, x] = [int(c) & 0xFF for c in (r, g, b, a)]

    def blit(self, x: int, y: int, other: "Bitmap") -> None:
        """Paste ``other`` with its top-left corner at (``x``, ``y``).

        The parts of ``other`` that fall outside this image are dropped.
        """
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + other.width, self.width), min(y + other.height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self._top_down[y0:y1, x0:x1] = other._top_down[y0 - y : y1 - y, x0 - x : x1 - x]

    def crop(self, x: int, y: int, width: int, height: int) -> "Bitmap":
        """Return a copy of the ``width`` x ``height`` region at (``x``, ``y``)."""
        if width < 0 or height < 0:
            raise ValueError(f"bad crop dimensions {width}x{height}")
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise ValueError(
                f"crop ({x}, {y}, {width}, {height}) outside "
                f"({self.width}, {self.height})"
            )
        result = Bitmap(width, height)
        result._top_down[:, :] = self._top_down[y : y + height, x : x + width]
        return result

    def save(self, path: PathLike) -> None:
        """Write the image as a 24-bit BMP file; alpha is not stored."""
        width, height = self.width, self.height
        row_size = _row_size(width)
        header = struct.pack(
            "<2sIHHIIiiHHIIiiII",
            b"BM",
            HEADER_SIZE + height * row_size,
            0,
            0,
            HEADER_SIZE,
            INFO_HEADER_SIZE,
            width,
            height,
            1,
            BITS_PER_PIXEL,
            0,
            height * row_size,
            0,
            0,
            0,
            0,
        )
        body = np.zeros((height, row_size), dtype=np.uint8)
        body[:, : 3 * width] = self._pixels[..., 2::-1].reshape(height, 3 * width)
        with open(path, "wb") as handle:
            handle.write(header)
            handle.write(body.tobytes())

    def premultiplied(self) -> bytes:
        """RGBA bytes, bottom row first, with colour channels scaled by alpha."""
        pixels = self._pixels.astype(np.uint16)
        alpha = pixels[..., 3:4]
        out = np.empty_like(self._pixels)
        out[..., :3] = pixels[..., :3] * alpha // 255
        out[..., 3] = self._pixels[..., 3]
        return out.tobytes()

    def raw_data(self) -> bytes:
        """RGBA bytes, bottom row first, width * height * 4 of them."""
        return self._pixels.tobytes()