# oscamp

This is a set of small operating-system and concurrency building blocks
written in plain Python. Each module covers one idea, and you can use or
read any of them on its own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### Threads, processes and channels

- `oscamp.mutex_counter`
  - `concurrent_counter(n_threads, count_per_thread)` has several threads add
    to a counter that a lock protects.
  - `concurrent_collect(n_threads)` has each thread append its id to a shared
    list, then returns the list sorted.
- `oscamp.channel`
  - `simple_send_recv(items)` sends items from a producer thread to the caller
    through a queue.
  - `multi_producer(n_producers)` collects `"msg from {id}"` from each of
    several threads and returns the messages sorted.
- `oscamp.process_pipe` runs child processes. It needs `cat`, `grep` and `sh`
    on the system.
  - `run_command(program, args)` returns the child's stdout. It raises
    `RuntimeError` if the program cannot be started.
  - `run_command_with_result(program, args)` does the same, but lets the
    `OSError` propagate instead.
  - `pipe_through_cat(input)` and `pipe_through_grep(pattern, input)` send
    text through a pipe and return the output.
  - `get_exit_code(command)` runs `sh -c command` and returns its exit code,
    or `-1` if a signal killed the child.

### Memory and descriptors

- `oscamp.mem_primitives` works on `bytes` and `bytearray`. It provides
  `memcpy(dst, src, n)`, `memset(dst, c, n)`, `memmove(buffer, dst, src, n)`,
  `strlen(s)` and `strcmp(s1, s2)`. `memmove` takes offsets within one buffer,
  and the two regions may overlap.
- `oscamp.bump_allocator`
  - `BumpAllocator(heap_start, heap_end)` hands out addresses from a simulated
    range.
  - Each request is described by a `Layout(size, align)`, where `align` must be
    a power of two.
  - `alloc` returns an integer address. It raises `AllocError` when the block
    does not fit.
  - `reset()` forgets all allocations. `dealloc` does nothing.
- `oscamp.free_list_allocator`
  - `FreeListAllocator(heap_start, heap_end)` first reuses freed blocks,
    taking the first one that fits.
  - If no freed block fits, it bump-allocates instead.
  - Every block is at least 16 bytes and aligned to at least 8.
  - `free_blocks` lists the freed blocks as `(address, size)` pairs.
- `oscamp.fd_table`
  - `FdTable` maps descriptors to objects that implement the abstract
    `File` class (`read`, `write`).
  - `alloc` always returns the lowest free descriptor.
  - `get` returns `None` for a descriptor that is not open.
  - `close` returns whether the descriptor was open.
  - `count` returns the number of open descriptors.

### Atomics

- `oscamp.atomic_counter`
  - `AtomicCounter(init)` is an unsigned 64-bit counter whose updates are
    indivisible.
  - `increment` and `decrement` wrap around and return the previous value.
  - `compare_and_swap(expected, new_val)` returns `(True, expected)` on
    success, or `(False, actual)` on failure.
  - `fetch_multiply` raises `OverflowError` if the product does not fit in
    64 bits.

### Async

- `oscamp.basic_future`
  - `CountDown(count)` yields to the event loop `count` times and then
    returns `"liftoff!"`.
  - `YieldOnce()` yields exactly once.
- `oscamp.async_tasks`
  - `concurrent_squares(n)` computes the squares in separate tasks.
  - `parallel_sleep_tasks(n, duration_ms)` runs `n` sleeping tasks at the same
    time and returns their ids sorted.
- `oscamp.async_channel`
  - `producer_consumer(items)` passes items from one task to another through a
    bounded `asyncio.Queue`.
  - `fan_in(n_producers)` collects one message from each producer task and
    returns them sorted.
- `oscamp.select_timeout`
  - `with_timeout(awaitable, timeout_ms)` returns `None` if the deadline
    passes first.
  - `race(f1, f2)` returns the first result and cancels the other awaitable.

### Paging

- `oscamp.pte_flags` builds and inspects SV39 page-table entries:
  - `make_pte`, `extract_ppn`, `extract_flags`, `is_valid`, `is_leaf` and
    `check_permission`;
  - the flag constants `PTE_V` through `PTE_D`.
- `oscamp.page_table_walk`
  - `SingleLevelPageTable(max_pages)` provides `map`, `unmap`, `lookup` and
    `translate`.
  - `translate` raises `PageFault` or `PermissionDenied` when translation
    fails.
  - `map` and `unmap` raise `IndexError` for a page outside the table.
  - The helpers are `va_to_vpn`, `va_to_offset` and `make_pa`.
- `oscamp.multi_level_pt`
  - `Sv39PageTable` is a three-level table with `map_page`, `map_superpage`
    (2 MiB, alignment checked) and `translate`.
  - `translate` returns the physical address or raises `PageFault`.
- `oscamp.tlb_sim`
  - `Tlb(capacity)` uses FIFO replacement. It keeps hit and miss statistics
    and can flush everything, by VPN or by ASID.
  - `Mmu(tlb_capacity)` puts the TLB in front of a per-ASID page table and
    refills the TLB on a miss.

## Example

```python
from oscamp.tlb_sim import Mmu

mmu = Mmu(4)
mmu.add_mapping(1, 0x100, 0x200, 0x7)
mmu.switch_asid(1)
assert mmu.translate(0x100) == 0x200   # miss, filled from the page table
assert mmu.translate(0x100) == 0x200   # hit
print(mmu.tlb.stats.hit_rate())        # 0.5
```

## What it does not do

- There is no command-line program. The package is a library only.
- It provides no lock or guard types of its own, such as spin locks or
  read-write locks. For locking, use `threading`.
- It has no thread-spawning helpers.