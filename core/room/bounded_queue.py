# core/room/bounded_queue.py
from __future__ import annotations
from numbers import Integral
from typing import Any, Deque, List, Optional, Union
import structlog

from core.room.errors import InvalidCapacityError, InvalidItemError
from core.utils.queueing import bounded, push_drop_oldest

log = structlog.get_logger()

def is_valid_capacity(capacity: Any) -> bool:
    # bool is an int subclass but not a capacity
    return isinstance(capacity, Integral) and not isinstance(capacity, bool) and capacity >= 0

def is_valid_zombie(zombie: Any) -> bool:
    return isinstance(zombie, str) and len(zombie) > 0

class BoundedQueue:
    """
    Fixed-capacity room of zombies with FIFO eviction.
    - insert() on a full room drops the oldest entry, then appends
    - bad input comes back as an error value; state is never touched
    Build through create_room(), which validates the capacity.
    """
    def __init__(self, capacity: int):
        self._capacity = int(capacity)
        self._entries: Deque[str] = bounded(self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return len(self._entries) == self._capacity

    def insert(self, zombie: Any) -> Optional[InvalidItemError]:
        if not is_valid_zombie(zombie):
            log.info("room.reject_item", value=repr(zombie))
            return InvalidItemError(zombie)

        evicted = push_drop_oldest(self._entries, zombie, limit=self._capacity)
        if evicted is not None:
            log.debug("room.evict", evicted=evicted, capacity=self._capacity)
        return None

    def entries(self) -> List[str]:
        return list(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def space_left(self) -> int:
        return self._capacity - len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self._capacity}, entries={self.entries()!r})"

def create_room(capacity: Any) -> Union[BoundedQueue, InvalidCapacityError]:
    if not is_valid_capacity(capacity):
        log.info("room.reject_capacity", value=repr(capacity))
        return InvalidCapacityError(capacity)
    room = BoundedQueue(capacity)
    log.debug("room.created", capacity=room.capacity)
    return room
