"""Unit tests for WaitingQueue and QueueStats."""

import pytest

from clubsimulator import QueueStats, WaitingQueue


class TestWaitingQueueOrdering:

    def test_fifo(self):
        queue = WaitingQueue(limit=3)
        for name in ("a", "b", "c"):
            queue.push(name)
        assert [queue.pop(), queue.pop(), queue.pop()] == ["a", "b", "c"]

    def test_peek(self):
        queue = WaitingQueue(limit=1)
        assert queue.peek() is None
        queue.push("a")
        assert queue.peek() == "a"
        assert len(queue) == 1

    def test_pop_empty_raises(self):
        with pytest.raises(IndexError):
            WaitingQueue(limit=1).pop()

    def test_duplicate_push_raises(self):
        queue = WaitingQueue(limit=2)
        queue.push("a")
        with pytest.raises(ValueError, match="already waiting"):
            queue.push("a")

    def test_withdraw_from_middle(self):
        queue = WaitingQueue(limit=3)
        for name in ("a", "b", "c"):
            queue.push(name)
        assert queue.withdraw("b") is True
        assert list(queue) == ["a", "c"]

    def test_withdraw_absent(self):
        assert WaitingQueue(limit=1).withdraw("x") is False

    def test_zero_limit_raises(self):
        with pytest.raises(ValueError, match="limit must be > 0"):
            WaitingQueue(limit=0)


class TestWaitingQueueBound:

    def test_full_only_beyond_limit(self):
        queue = WaitingQueue(limit=2)
        queue.push("a")
        queue.push("b")
        assert not queue.is_full()
        queue.push("c")
        assert queue.is_full()


class TestQueueStats:

    def test_counters(self):
        queue = WaitingQueue(limit=2)
        queue.push("a")
        queue.push("b")
        queue.push("c")
        queue.pop()
        queue.withdraw("c")
        queue.note_turned_away()

        stats = queue.stats()
        assert stats == QueueStats(
            depth=1,
            peak_depth=3,
            total_accepted=3,
            total_promoted=1,
            total_withdrawn=1,
            total_turned_away=1,
        )

    def test_to_dict(self):
        queue = WaitingQueue(limit=1)
        queue.push("a")
        assert queue.stats().to_dict() == {
            "depth": 1,
            "peak_depth": 1,
            "accepted": 1,
            "promoted": 0,
            "withdrawn": 0,
            "turned_away": 0,
        }
