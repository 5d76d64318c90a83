"""Per-location block state."""

from dataclasses import dataclass


@dataclass
class BlockData:
    """A block instance: its model, damage and cached face visibility.

    ``neighbor_cache`` is zero when invalid; otherwise bit ``i`` is set when
    face ``i`` is visible.
    """

    block_model: int = 0
    break_amount: float = 0.0
    neighbor_cache: int = 0

    def __post_init__(self) -> None:
        if self.block_model < 0:
            raise ValueError(f"bad block model: {self.block_model}")

    @property
    def is_air(self) -> bool:
        """True for the empty block."""
        return self.block_model == 0