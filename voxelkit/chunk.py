"""Cubic chunks of blocks and their byte serialization."""

from __future__ import annotations

from itertools import product
from typing import Iterator, List, Optional, Tuple

from voxelkit.block import BlockData

CHUNK_SIZE = 16
BYTES_PER_BLOCK = 3
SERIALIZED_CHUNK_SIZE = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE * BYTES_PER_BLOCK


def _in_range(x: int, y: int, z: int) -> bool:
    return all(0 <= c < CHUNK_SIZE for c in (x, y, z))


def _storage_order() -> Iterator[Tuple[int, int, int]]:
    """Block coordinates (x, y, z) in serialized order: x varies fastest."""
    for z, y, x in product(range(CHUNK_SIZE), repeat=3):
        yield x, y, z


class Chunk:
    """A CHUNK_SIZE x CHUNK_SIZE x CHUNK_SIZE block of the world.

    ``blocks[x][y][z]`` holds the :class:`BlockData` at local coordinates
    (x, y, z); a new chunk is all air.
    """

    def __init__(self) -> None:
        self.blocks: List[List[List[BlockData]]] = [
            [[BlockData() for _ in range(CHUNK_SIZE)] for _ in range(CHUNK_SIZE)]
            for _ in range(CHUNK_SIZE)
        ]
        self._cached = False
        self.has_ever_cached = False

    def set_block(self, x: int, y: int, z: int, model: int) -> None:
        """Replace the block at local (x, y, z) with a fresh block of ``model``."""
        if not _in_range(x, y, z):
            raise IndexError(f"bad coordinates: {x} {y} {z}")
        self.blocks[x][y][z] = BlockData(model)

    def get_block(self, x: int, y: int, z: int) -> Optional[BlockData]:
        """Return the block at local (x, y, z), or None if it is air or out of range."""
        if not _in_range(x, y, z):
            return None
        block = self.blocks[x][y][z]
        return None if block.is_air else block

    def serialize(self) -> bytes:
        """Encode every block as three bytes: model high byte, model low byte, damage."""
        out = bytearray()
        for x, y, z in _storage_order():
            block = self.blocks[x][y][z]
            model = block.block_model
            damage = int(block.break_amount * 256)
            out += bytes(((model >> 8) & 0xFF, model & 0xFF, damage & 0xFF))
        return bytes(out)

    def deserialize(self, buffer: bytes) -> None:
        """Load block models and damage from bytes made by :meth:`serialize`."""
        if len(buffer) != SERIALIZED_CHUNK_SIZE:
            raise ValueError(f"bad serialized chunk size: {len(buffer)}")
        data = iter(bytes(buffer))
        for (x, y, z), (high, low, damage) in zip(_storage_order(), zip(data, data, data)):
            block = self.blocks[x][y][z]
            block.break_amount = damage / 256.0
            block.block_model = high * 256 + low

    def mark_cached(self) -> None:
        """Record that rendering data for the current blocks has been built."""
        self._cached = True
        self.has_ever_cached = True

    def is_cached(self) -> bool:
        """True if the rendering data is up to date."""
        return self._cached

    def invalidate_cache(self) -> None:
        """Mark the rendering data as out of date; call after any block changes."""
        self._cached = False