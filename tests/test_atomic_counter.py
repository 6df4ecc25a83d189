import threading

import pytest

from oscamp.atomic_counter import AtomicCounter


def test_basic_ops():
    c = AtomicCounter(0)
    assert c.increment() == 0
    assert c.increment() == 1
    assert c.get() == 2
    assert c.decrement() == 2
    assert c.get() == 1


def test_cas_success():
    c = AtomicCounter(10)
    assert c.compare_and_swap(10, 20) == (True, 10)
    assert c.get() == 20


def test_cas_failure():
    c = AtomicCounter(10)
    assert c.compare_and_swap(5, 20) == (False, 10)
    assert c.get() == 10


def test_fetch_multiply():
    c = AtomicCounter(3)
    assert c.fetch_multiply(4) == 3
    assert c.get() == 12


def test_fetch_multiply_overflow():
    c = AtomicCounter(1 << 63)
    with pytest.raises(OverflowError):
        c.fetch_multiply(2)
    assert c.get() == 1 << 63


def test_decrement_wraps_at_zero():
    c = AtomicCounter(0)
    assert c.decrement() == 0
    assert c.get() == (1 << 64) - 1


def test_concurrent_increment():
    counter = AtomicCounter(0)

    def work():
        for _ in range(1000):
            counter.increment()

    threads = [threading.Thread(target=work) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert counter.get() == 10000