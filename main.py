# main.py
from __future__ import annotations
import sys
import structlog
from tools.room_cli import main as cli_main

def main() -> int:
    log = structlog.get_logger()
    code = cli_main()
    log.debug("app.stop", code=code)
    return code

if __name__ == "__main__":
    sys.exit(main())
