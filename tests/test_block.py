import pytest

from voxelkit.block import BlockData


def test_default_is_air():
    block = BlockData()
    assert block.block_model == 0
    assert block.is_air
    assert block.break_amount == 0.0
    assert block.neighbor_cache == 0


def test_model_is_kept():
    block = BlockData(7)
    assert block.block_model == 7
    assert not block.is_air


def test_negative_model_rejected():
    with pytest.raises(ValueError):
        BlockData(-1)


def test_break_amount_mutable():
    block = BlockData(2)
    block.break_amount = 0.5
    assert block.break_amount == 0.5