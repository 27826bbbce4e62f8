# core/utils/queueing.py
from __future__ import annotations
import sys
from collections import deque
from typing import Any, Deque, Optional, TypeVar

T = TypeVar("T")

def push_drop_oldest(buf: Deque[T], item: T, limit: Optional[int] = None) -> Optional[T]:
    """
    Append to a bounded deque; if it is full, the oldest item falls off the left.
    `limit` defaults to buf.maxlen; deques without a maxlen are trimmed by hand.
    Returns whatever was pushed out (the item itself when the limit is 0), else None.
    """
    cap = buf.maxlen if limit is None else limit
    evicted: Optional[T] = None
    if cap is not None and len(buf) >= cap:
        evicted = buf[0] if buf else item
        if buf.maxlen is None and buf:
            buf.popleft()
    buf.append(item)
    return evicted

def bounded(capacity: int) -> Deque[Any]:
    # deque maxlen must fit in a C ssize_t
    if capacity > sys.maxsize:
        return deque()
    return deque(maxlen=capacity)
