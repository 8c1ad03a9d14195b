import pytest

from xvutils.kralloc import HEADER_SIZE, MIN_CORE_UNITS, Allocator

CORE = MIN_CORE_UNITS * HEADER_SIZE


def test_addresses_are_header_aligned_and_inside_heap():
    alloc = Allocator(limit=4 * CORE)
    for size in (1, 15, 16, 100, 1000):
        addr = alloc.malloc(size)
        assert addr % HEADER_SIZE == 0
        assert addr + size <= alloc.heap_size


def test_allocations_do_not_overlap():
    alloc = Allocator(limit=4 * CORE)
    sizes = [10, 200, 33, 4000, 1, 77]
    spans = sorted((alloc.malloc(n), n) for n in sizes)
    for (a, na), (b, _) in zip(spans, spans[1:]):
        assert a + na <= b


def test_heap_grows_by_minimum_core():
    alloc = Allocator(limit=4 * CORE)
    alloc.malloc(1)
    assert alloc.heap_size == CORE


def test_freeing_everything_coalesces_into_one_block():
    alloc = Allocator(limit=4 * CORE)
    addrs = [alloc.malloc(n) for n in (50, 500, 5, 5000, 64)]
    for addr in addrs[::2] + addrs[1::2]:
        alloc.free(addr)
    assert alloc.free_blocks() == [(0, alloc.heap_size)]


def test_free_then_malloc_reuses_address():
    alloc = Allocator(limit=CORE)
    first = alloc.malloc(100)
    alloc.free(first)
    assert alloc.malloc(100) == first


def test_free_space_accounts_for_live_allocations():
    alloc = Allocator(limit=4 * CORE)
    sizes = [300, 20, 9000]
    for n in sizes:
        alloc.malloc(n)
    free_total = sum(length for _, length in alloc.free_blocks())
    assert free_total <= alloc.heap_size - sum(sizes)


def test_free_blocks_are_in_address_order_and_disjoint():
    alloc = Allocator(limit=4 * CORE)
    addrs = [alloc.malloc(64) for _ in range(6)]
    for addr in addrs[::2]:
        alloc.free(addr)
    blocks = alloc.free_blocks()
    for (a, la), (b, _) in zip(blocks, blocks[1:]):
        assert a + la <= b


def test_out_of_memory_raises():
    with pytest.raises(MemoryError):
        Allocator(limit=100).malloc(1)


def test_exhausting_the_heap_stays_within_limit():
    limit = 2 * CORE
    alloc = Allocator(limit=limit)
    with pytest.raises(MemoryError):
        while True:
            alloc.malloc(10001)
    assert alloc.heap_size <= limit


def test_memory_is_usable_again_after_exhaustion():
    alloc = Allocator(limit=2 * CORE)
    addrs = []
    with pytest.raises(MemoryError):
        while True:
            addrs.append(alloc.malloc(10001))
    for addr in addrs:
        alloc.free(addr)
    big = alloc.malloc(1024 * 20)
    assert big + 1024 * 20 <= alloc.heap_size


def test_invalid_and_double_free_raise():
    alloc = Allocator(limit=CORE)
    addr = alloc.malloc(8)
    with pytest.raises(ValueError):
        alloc.free(addr + 1)
    alloc.free(addr)
    with pytest.raises(ValueError):
        alloc.free(addr)


def test_negative_size_and_limit_rejected():
    with pytest.raises(ValueError):
        Allocator(limit=-1)
    with pytest.raises(ValueError):
        Allocator(limit=CORE).malloc(-1)