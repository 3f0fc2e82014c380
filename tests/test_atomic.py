import threading

import pytest

from xcore.atomic import AtomicInteger, AtomicReference


def test_initial_value_loaded():
    counter = AtomicInteger(32, 42)
    assert counter.load() == 42


def test_default_value_is_zero():
    assert AtomicInteger(16).load() == 0


def test_invalid_width_rejected():
    with pytest.raises(ValueError):
        AtomicInteger(0)


def test_value_out_of_range_rejected():
    with pytest.raises(ValueError):
        AtomicInteger(8, 256)


def test_fetch_add_returns_previous():
    counter = AtomicInteger(32, 10)
    assert counter.fetch_add(5) == 10
    assert counter.load() == 15


def test_fetch_add_wraps():
    counter = AtomicInteger(8, 255)
    assert counter.fetch_add(1) == 255
    assert counter.load() == 0


def test_fetch_sub_wraps():
    counter = AtomicInteger(8, 0)
    assert counter.fetch_sub(1) == 0
    assert counter.load() == 255


def test_fetch_sub_returns_previous():
    counter = AtomicInteger(16, 100)
    assert counter.fetch_sub(40) == 100
    assert counter.load() == 60


def test_fetch_and_clears_bits():
    counter = AtomicInteger(8, 0xF0)
    assert counter.fetch_and(0x0F) == 0xF0
    assert counter.load() == 0


def test_fetch_or_sets_bits():
    counter = AtomicInteger(8, 0xF0)
    assert counter.fetch_or(0x0F) == 0xF0
    assert counter.load() == 0xFF


def test_compare_exchange_success():
    counter = AtomicInteger(32, 7)
    assert counter.compare_exchange(7, 9) == (True, 7)
    assert counter.load() == 9


def test_compare_exchange_failure_reports_current():
    counter = AtomicInteger(32, 7)
    assert counter.compare_exchange(8, 9) == (False, 7)
    assert counter.load() == 7


def test_concurrent_adds_are_not_lost():
    counter = AtomicInteger(32)
    workers = 4
    steps = 1000

    def work():
        for _ in range(steps):
            counter.fetch_add(1)

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter.load() == workers * steps


def test_compare_exchange_retry_loop():
    counter = AtomicInteger(32, 3)
    current = counter.load()
    while True:
        ok, current = counter.compare_exchange(current, current * 2)
        if ok:
            break
    assert counter.load() == 6


def test_reference_exchange_by_identity():
    first = ["a"]
    second = ["b"]
    ref = AtomicReference(first)
    assert ref.compare_exchange(first, second) == (True, first)
    assert ref.load() is second


def test_reference_exchange_rejects_equal_but_distinct():
    original = ["a"]
    ref = AtomicReference(original)
    ok, observed = ref.compare_exchange(["a"], None)
    assert ok is False
    assert observed is original
    assert ref.load() is original


def test_reference_default_is_none():
    ref = AtomicReference()
    marker = object()
    assert ref.compare_exchange(None, marker) == (True, None)
    assert ref.load() is marker