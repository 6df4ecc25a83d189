import pytest

from oscamp.bump_allocator import AllocError, BumpAllocator, Layout

HEAP_SIZE = 4096
HEAP_START = 0x10000


def make_allocator():
    return BumpAllocator(HEAP_START, HEAP_START + HEAP_SIZE)


def test_alloc_basic():
    alloc = make_allocator()
    ptr = alloc.alloc(Layout(16, 8))
    assert HEAP_START <= ptr < HEAP_START + HEAP_SIZE


def test_alloc_alignment():
    alloc = make_allocator()
    for align in [1, 2, 4, 8, 16, 64]:
        ptr = alloc.alloc(Layout(1, align))
        assert ptr % align == 0, f"returned address must satisfy align={align}"


def test_alloc_no_overlap():
    alloc = make_allocator()
    layout = Layout(64, 8)
    p1 = alloc.alloc(layout)
    p2 = alloc.alloc(layout)
    assert p1 + 64 <= p2 or p2 + 64 <= p1


def test_alloc_oom():
    alloc = make_allocator()
    with pytest.raises(AllocError):
        alloc.alloc(Layout(HEAP_SIZE + 1, 1))


def test_alloc_fill_heap():
    alloc = make_allocator()
    layout = Layout(256, 1)
    addresses = [alloc.alloc(layout) for _ in range(16)]
    assert addresses == [HEAP_START + 256 * i for i in range(16)]
    with pytest.raises(AllocError):
        alloc.alloc(layout)


def test_reset():
    alloc = make_allocator()
    layout = Layout(HEAP_SIZE, 1)
    p1 = alloc.alloc(layout)
    alloc.reset()
    p2 = alloc.alloc(layout)
    assert p1 == p2


def test_failed_alloc_does_not_move_pointer():
    alloc = make_allocator()
    with pytest.raises(AllocError):
        alloc.alloc(Layout(HEAP_SIZE + 1, 1))
    assert alloc.alloc(Layout(HEAP_SIZE, 1)) == HEAP_START


def test_dealloc_does_not_reclaim():
    alloc = make_allocator()
    layout = Layout(32, 8)
    p1 = alloc.alloc(layout)
    alloc.dealloc(p1, layout)
    p2 = alloc.alloc(layout)
    assert p2 == p1 + 32


@pytest.mark.parametrize("align", [0, 3, 6, -4])
def test_layout_rejects_bad_alignment(align):
    with pytest.raises(ValueError):
        Layout(8, align)


def test_layout_rejects_negative_size():
    with pytest.raises(ValueError):
        Layout(-1, 8)