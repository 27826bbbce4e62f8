# app/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Union

ENV_CAPACITY = "ZOMBIE_ROOM_CAPACITY"
ENV_DEBUG = "ZOMBIE_ROOM_DEBUG"

_TRUTHY = ("1", "true", "yes", "on")

def parse_capacity(raw: str) -> Union[int, str]:
    """int if it parses, else the stripped raw text (left for create_room() to reject)."""
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        return raw

@dataclass(frozen=True)
class RoomConfig:
    # used when the CLI gets no --capacity
    default_capacity: Union[int, str] = 3
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RoomConfig":
        """
        Read overrides from the environment. A capacity that is not a decimal integer is
        kept as the raw string so create_room() reports it instead of it being silently replaced.
        """
        env = os.environ if env is None else env
        base = cls()
        raw_cap = env.get(ENV_CAPACITY)
        capacity = base.default_capacity if raw_cap is None else parse_capacity(raw_cap)
        raw_debug = env.get(ENV_DEBUG)
        debug = base.debug if raw_debug is None else raw_debug.strip().lower() in _TRUTHY
        return cls(default_capacity=capacity, debug=debug)
