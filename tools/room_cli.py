# tools/room_cli.py
from __future__ import annotations
import argparse
import sys
from typing import List, Optional
import structlog

from app.config import RoomConfig, parse_capacity
from app.logging_config import configure_logging
from core.room.bounded_queue import BoundedQueue, create_room
from core.room.errors import RoomError

log = structlog.get_logger()

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="zombie-room", description="Fill a bounded room with zombies")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging (evictions)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_fill = sub.add_parser("fill", help="Insert zombies in order and show what is left in the room")
    p_fill.add_argument("-c", "--capacity", type=parse_capacity, help="room capacity (default: $ZOMBIE_ROOM_CAPACITY or 3)")
    p_fill.add_argument("zombies", nargs="*", help="zombie names, oldest first")
    return ap

def print_room(room: BoundedQueue) -> None:
    print("\n=== Room ===")
    print(f"Capacity   : {room.capacity}")
    print(f"Zombies    : {', '.join(room.entries()) or '-'}")
    print(f"Count      : {room.count()}")
    print(f"Space left : {room.space_left()}")
    print(f"Full       : {'yes' if room.is_full() else 'no'}")

def fill(capacity, zombies: List[str]) -> int:
    room = create_room(capacity)
    if isinstance(room, RoomError):
        print(room.message)
        return 2

    rejected = 0
    for z in zombies:
        err = room.insert(z)
        if err is not None:
            print(err.message)
            rejected += 1

    print_room(room)
    log.info("room.fill.done", inserted=len(zombies) - rejected, rejected=rejected, count=room.count())
    return 2 if rejected else 0

def main(argv: Optional[List[str]] = None) -> int:
    cfg = RoomConfig.from_env()
    args = build_parser().parse_args(argv)
    configure_logging(debug=args.verbose or cfg.debug)

    if args.cmd == "fill":
        capacity = args.capacity if args.capacity is not None else cfg.default_capacity
        return fill(capacity, args.zombies)
    return 2

if __name__ == "__main__":
    sys.exit(main())
