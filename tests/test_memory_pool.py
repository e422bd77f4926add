import pytest

from neatgfx.memory_pool import MemoryPool


def test_new_pool_is_empty():
    pool = MemoryPool(4)
    assert len(pool) == 0
    assert pool.capacity == 0
    assert pool.chunks == 0


def test_default_block_size():
    assert MemoryPool().block_size == 8192


def test_reserve_allocates_whole_blocks():
    pool = MemoryPool(4)
    pool.reserve(1)
    assert pool.chunks == 1
    assert pool.capacity == pool.block_size
    assert len(pool) == 0
    pool.reserve(9)
    assert pool.chunks == 3
    assert pool.capacity == 3 * pool.block_size


def test_resize_grows_size_and_capacity():
    pool = MemoryPool(4)
    pool.resize(6)
    assert len(pool) == 6
    assert pool.capacity >= 6
    assert pool.chunks == 2


def test_resize_never_shrinks():
    pool = MemoryPool(4)
    pool.resize(6)
    pool.resize(2)
    assert len(pool) == 6


def test_set_and_get_across_blocks():
    pool = MemoryPool(3)
    pool.resize(7)
    for n in range(len(pool)):
        pool[n] = f"item-{n}"
    assert [pool[n] for n in range(len(pool))] == [f"item-{n}" for n in range(7)]


def test_destroy_clears_slot():
    pool = MemoryPool(2)
    pool.resize(3)
    pool[2] = {"value": 1}
    pool.destroy(2)
    assert pool[2] is None
    assert len(pool) == 3


@pytest.mark.parametrize("index", [3, 4, -1])
def test_out_of_range_access_raises(index):
    pool = MemoryPool(4)
    pool.resize(3)
    with pytest.raises(IndexError):
        pool[index]
    with pytest.raises(IndexError):
        pool[index] = 1
    with pytest.raises(IndexError):
        pool.destroy(index)


def test_reserved_but_unsized_slots_are_out_of_range():
    pool = MemoryPool(4)
    pool.reserve(4)
    with pytest.raises(IndexError):
        pool.__getitem__(0)
    assert len(pool) == 0
    assert pool.capacity == 4
    pool.resize(1)
    pool[0] = "value"
    assert pool[0] == "value"


def test_invalid_block_size():
    with pytest.raises(ValueError):
        MemoryPool(0)