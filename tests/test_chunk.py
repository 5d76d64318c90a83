import pytest

from voxelkit.chunk import CHUNK_SIZE, SERIALIZED_CHUNK_SIZE, Chunk


def test_new_chunk_is_all_air():
    chunk = Chunk()
    assert chunk.get_block(0, 0, 0) is None
    assert chunk.get_block(CHUNK_SIZE - 1, CHUNK_SIZE - 1, CHUNK_SIZE - 1) is None
    assert chunk.blocks[3][4][5].block_model == 0


def test_set_and_get_block():
    chunk = Chunk()
    chunk.set_block(1, 2, 3, 7)
    block = chunk.get_block(1, 2, 3)
    assert block.block_model == 7
    assert block is chunk.blocks[1][2][3]


def test_set_block_air_reads_as_none():
    chunk = Chunk()
    chunk.set_block(1, 1, 1, 5)
    chunk.set_block(1, 1, 1, 0)
    assert chunk.get_block(1, 1, 1) is None


@pytest.mark.parametrize("coords", [(-1, 0, 0), (0, CHUNK_SIZE, 0), (0, 0, 99)])
def test_set_block_out_of_range(coords):
    with pytest.raises(IndexError):
        Chunk().set_block(*coords, 1)


@pytest.mark.parametrize("coords", [(-1, 0, 0), (CHUNK_SIZE, 0, 0), (0, 0, -5)])
def test_get_block_out_of_range_is_none(coords):
    assert Chunk().get_block(*coords) is None


def test_set_block_negative_model_rejected():
    with pytest.raises(ValueError):
        Chunk().set_block(0, 0, 0, -1)


def test_serialized_size():
    assert len(Chunk().serialize()) == SERIALIZED_CHUNK_SIZE
    assert SERIALIZED_CHUNK_SIZE == CHUNK_SIZE ** 3 * 3


def test_empty_chunk_serializes_to_zeros():
    assert Chunk().serialize() == bytes(SERIALIZED_CHUNK_SIZE)


def test_serialize_layout_x_fastest():
    chunk = Chunk()
    chunk.set_block(1, 0, 0, 0x0102)
    chunk.blocks[1][0][0].break_amount = 0.5
    data = chunk.serialize()
    assert data[3:6] == bytes([0x01, 0x02, 128])
    assert data[:3] == bytes(3)


def test_serialize_layout_z_slowest():
    chunk = Chunk()
    chunk.set_block(0, 0, 1, 9)
    data = chunk.serialize()
    offset = CHUNK_SIZE * CHUNK_SIZE * 3
    assert data[offset : offset + 3] == bytes([0, 9, 0])


def test_round_trip():
    chunk = Chunk()
    chunk.set_block(0, 0, 0, 1)
    chunk.set_block(15, 15, 15, 300)
    chunk.set_block(4, 9, 2, 65535)
    chunk.blocks[4][9][2].break_amount = 0.25
    data = chunk.serialize()

    other = Chunk()
    other.deserialize(data)
    assert other.get_block(0, 0, 0).block_model == 1
    assert other.get_block(15, 15, 15).block_model == 300
    assert other.get_block(4, 9, 2).block_model == 65535
    assert other.get_block(4, 9, 2).break_amount == 0.25
    assert other.serialize() == data


def test_deserialize_accepts_bytearray():
    chunk = Chunk()
    chunk.set_block(2, 3, 4, 12)
    other = Chunk()
    other.deserialize(bytearray(chunk.serialize()))
    assert other.get_block(2, 3, 4).block_model == 12


@pytest.mark.parametrize("size", [0, SERIALIZED_CHUNK_SIZE - 1, SERIALIZED_CHUNK_SIZE + 1])
def test_deserialize_wrong_size(size):
    with pytest.raises(ValueError):
        Chunk().deserialize(bytes(size))


def test_cache_flags():
    chunk = Chunk()
    assert chunk.is_cached() is False
    chunk.mark_cached()
    assert chunk.is_cached() is True
    chunk.invalidate_cache()
    assert chunk.is_cached() is False
    assert chunk.has_ever_cached is True