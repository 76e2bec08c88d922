# src/task_widget/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds WidgetState, then either renders once or keeps
re-rendering on the configured interval (--watch) until interrupted.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from ..cli.bootstrap import create_widget_state
from ..config import get_settings
from ..logging_setup import setup_logging
from ..widget.ordering import ORDERING_NAMES
from ..widget.refresh_loop import refresh_once, run_refresh_loop

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="task-widget",
        description="Render the Taskwarrior task list as a desktop widget snapshot.",
    )
    p.add_argument("--watch", action="store_true", help="Keep re-rendering every refresh interval.")
    p.add_argument("--interval", type=float, default=None, help="Refresh interval in seconds (with --watch).")
    p.add_argument("--input", metavar="PATH", default=None,
                   help="Read an export payload from PATH ('-' for stdin) instead of running the command.")
    p.add_argument("--output", metavar="PATH", default=None, help="Write the document to PATH instead of stdout.")
    p.add_argument("--ordering", choices=ORDERING_NAMES, default=None, help="Row ordering law.")
    p.add_argument("--max-entries", type=int, default=None, help="Maximum number of rows.")
    p.add_argument("--page", action="store_true", help="Wrap the widget in a standalone HTML page.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    if args.max_entries is not None and args.max_entries < 1:
        logger.error("--max-entries must be at least 1")
        return 2

    state = create_widget_state(
        settings=settings,
        input_path=args.input,
        output_path=args.output,
        ordering=args.ordering,
        max_entries=args.max_entries,
        full_page=args.page,
    )

    if not args.watch:
        try:
            refresh_once(state.source, state.sink, state.render)
        except OSError:
            logger.exception("Writing widget document failed")
            return 1
        return 0

    interval = args.interval if args.interval is not None else settings.refresh_seconds
    logger.info("Starting %s (refresh every %ss). Press Ctrl+C to stop.", settings.app_name, interval)
    try:
        asyncio.run(
            run_refresh_loop(state.source, state.sink, state.render, interval_seconds=interval)
        )
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
