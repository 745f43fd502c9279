# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, then runs one of:
- serve:   the HTTP API (and static UI, if present) under uvicorn,
- console: the console REPL over local documents or a remote API.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ..config import get_settings
from ..errors import TaskboardError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskboard", description="Personal task tracker.")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP API server.")
    serve.add_argument("--host", default=None, help="Bind address (default: TASKBOARD_HOST).")
    serve.add_argument("--port", type=int, default=None, help="Port (default: TASKBOARD_PORT).")

    console = sub.add_parser("console", help="Run the interactive console.")
    console.add_argument(
        "--remote",
        default=None,
        metavar="URL",
        help="Talk to a running server instead of the local documents.",
    )
    return parser


def _serve(settings, host: str | None, port: int | None) -> None:
    import uvicorn

    from ..server.app import create_app

    app = create_app(settings)
    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info("Serving on http://%s:%d", bind_host, bind_port)
    # log_config=None keeps uvicorn on our root handlers.
    uvicorn.run(app, host=bind_host, port=bind_port, log_config=None)


def _console(settings, remote: str | None) -> None:
    from ..cli.bootstrap import close_state, create_initial_state
    from ..connectors.console_connector import run_console_loop

    state = create_initial_state(settings=settings, remote_url=remote)
    try:
        run_console_loop(state)
    finally:
        close_state(state)


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        if args.command == "serve":
            _serve(settings, args.host, args.port)
        else:
            _console(settings, getattr(args, "remote", None))
    except TaskboardError as ex:
        logger.error("%s failed: %s", args.command or "console", ex)
        print(f"taskboard: {ex}", file=sys.stderr)
        raise SystemExit(1) from ex
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
