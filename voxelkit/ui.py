"""Rectangular screen elements showing either a texture or a model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

Pixel = Tuple[int, int]


def _pair(value: Sequence[int]) -> Pixel:
    x, y = value
    return (int(x), int(y))


@dataclass
class UIElement:
    """An element placed at ``location`` (top-left) with ``size`` in pixels.

    It shows the texture ``texture`` unless :meth:`set_model` switched it to
    showing a model.
    """

    texture: int = 0
    location: Pixel = (0, 0)
    size: Pixel = (0, 0)
    model_id: int = 0
    using_model: bool = False

    def __post_init__(self) -> None:
        self.location = _pair(self.location)
        self.size = _pair(self.size)

    def set_model(self, model_id: int) -> None:
        """Show the given model instead of a texture."""
        self.model_id = model_id
        self.using_model = True

    def set_texture(self, texture_id: int) -> None:
        """Show the given texture instead of a model."""
        self.texture = texture_id
        self.using_model = False

    def intersect(self, position: Sequence[int]) -> bool:
        """Return True if the pixel ``position`` lies within the element, edges included."""
        px, py = position
        x, y = self.location
        w, h = self.size
        return x <= px <= x + w and y <= py <= y + h