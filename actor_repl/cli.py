"""CLI entrypoint for the actor REPL."""

import argparse
import asyncio
from typing import List, Optional

from . import __version__
from .config import ReplConfig
from .core.logging import get_logger, set_level
from .errors import ConfigError
from .repl.main import run_repl


logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="actor-repl",
        description="REPL driven by an input actor, a worker actor and a coordinator",
        epilog="commands: add <a> <b>, ping, help (or ?), quit",
    )
    p.add_argument("--startup-delay", type=float, help="Seconds to wait before reading input")
    p.add_argument(
        "--capacity",
        type=int,
        dest="mailbox_capacity",
        help="Buffered messages per mailbox (default 1)",
    )
    p.add_argument(
        "--quit-on-eof",
        action="store_const",
        const=True,
        default=None,
        help="Treat the end of input as a quit command",
    )
    p.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = ReplConfig.from_env().with_overrides(
            startup_delay=args.startup_delay,
            mailbox_capacity=args.mailbox_capacity,
            quit_on_eof=args.quit_on_eof,
            log_level=args.log_level.upper() if args.log_level else None,
        ).validate()
    except ConfigError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    set_level(config.log_level)
    try:
        asyncio.run(run_repl(config))
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
