"""Pages of clickable buttons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from voxelkit.ui import UIElement

OnClick = Callable[[], None]


@dataclass
class Button:
    """A UI element with a caption and a callback run when it is clicked."""

    elem: UIElement
    text: str
    on_click: OnClick


@dataclass
class PageUI:
    """A page of buttons over an optional background element."""

    buttons: List[Button] = field(default_factory=list)
    background: Optional[UIElement] = None

    def click(self, position: Sequence[int]) -> None:
        """Run the callback of every button containing the pixel ``position``."""
        for button in list(self.buttons):
            if button.elem.intersect(position):
                button.on_click()