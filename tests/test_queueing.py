# tests/test_queueing.py
# How to run:
#   pytest -q
#
# Verifies push_drop_oldest reports what fell off a maxlen-bounded deque.

from collections import deque

from core.utils.queueing import bounded, push_drop_oldest


def test_push_below_capacity_evicts_nothing():
    buf = bounded(2)
    assert push_drop_oldest(buf, "a") is None
    assert push_drop_oldest(buf, "b") is None
    assert list(buf) == ["a", "b"]


def test_push_at_capacity_returns_oldest():
    buf = bounded(2)
    push_drop_oldest(buf, "a")
    push_drop_oldest(buf, "b")
    assert push_drop_oldest(buf, "c") == "a"
    assert list(buf) == ["b", "c"]


def test_zero_maxlen_drops_the_pushed_item():
    buf = bounded(0)
    assert push_drop_oldest(buf, "a") == "a"
    assert len(buf) == 0


def test_unbounded_deque_never_evicts():
    buf = deque()
    for i in range(10):
        assert push_drop_oldest(buf, i) is None
    assert len(buf) == 10


def test_limit_trims_deque_without_maxlen():
    buf = deque()
    push_drop_oldest(buf, "a", limit=2)
    push_drop_oldest(buf, "b", limit=2)
    assert push_drop_oldest(buf, "c", limit=2) == "a"
    assert list(buf) == ["b", "c"]


def test_capacity_beyond_ssize_t_gets_unbounded_deque():
    buf = bounded(2**63)
    assert buf.maxlen is None
