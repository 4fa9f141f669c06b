"""Tests for the session sequence counter."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from midiapi.protocol.sequence import SequenceCounter


class TestSequenceCounter:
    """Tests for SequenceCounter."""

    def test_starts_at_zero(self):
        """Test a fresh counter reports 0 before any packet."""
        assert SequenceCounter().value == 0

    def test_first_value_is_one(self):
        """Test pre-increment: the first packet is numbered 1."""
        assert SequenceCounter().next() == 1

    def test_sequential_calls(self):
        """Test N sequential calls return 1..N."""
        counter = SequenceCounter()
        assert [counter.next() for _ in range(100)] == list(range(1, 101))
        assert counter.value == 100

    def test_concurrent_calls_are_distinct(self):
        """Test N concurrent calls return exactly {1..N}."""
        counter = SequenceCounter()
        n = 2000
        with ThreadPoolExecutor(max_workers=16) as pool:
            values = list(pool.map(lambda _: counter.next(), range(n)))

        assert len(values) == n
        assert set(values) == set(range(1, n + 1))

    def test_concurrent_threads_each_see_increasing_values(self):
        """Test values observed by a single thread are strictly increasing."""
        counter = SequenceCounter()
        seen: dict[int, list[int]] = {}
        barrier = threading.Barrier(4)

        def worker(index: int) -> None:
            barrier.wait()
            seen[index] = [counter.next() for _ in range(250)]

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for values in seen.values():
            assert values == sorted(values)
        merged = [v for values in seen.values() for v in values]
        assert sorted(merged) == list(range(1, 1001))

    def test_wraps_after_16_bits(self):
        """Test the counter wraps from 0xFFFF to 0x0000."""
        counter = SequenceCounter(start=0xFFFE)
        assert counter.next() == 0xFFFF
        assert counter.next() == 0x0000
        assert counter.next() == 0x0001

    def test_reset(self):
        """Test reset returns the counter to 0."""
        counter = SequenceCounter()
        counter.next()
        counter.next()
        counter.reset()
        assert counter.value == 0
        assert counter.next() == 1

    @pytest.mark.parametrize("start", [-1, 0x10000])
    def test_invalid_start(self, start):
        """Test that starts outside 16 bits are rejected."""
        with pytest.raises(ValueError):
            SequenceCounter(start=start)

    def test_repr(self):
        """Test counter repr shows the current value."""
        counter = SequenceCounter()
        counter.next()
        assert repr(counter) == "SequenceCounter(value=1)"
