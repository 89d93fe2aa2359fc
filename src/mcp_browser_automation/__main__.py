"""
Entry point: `mcp-browser-automation` or `python -m mcp_browser_automation`.

MCP hosts launch this module as a subprocess with no arguments and talk to it
over stdin/stdout. Logs therefore go to stderr only.
"""

import sys
import asyncio
import atexit
import signal
import logging

from .config import get_env_config, load_env_file
from .dispatcher import Dispatcher
from .server import serve
from .session import SessionManager
from .tools import build_catalog, build_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def install_signal_handlers(sessions: SessionManager) -> None:
    """Release the browser before exiting on SIGTERM/SIGINT so Chrome is never orphaned."""

    def _handler(signum, frame):
        logger.info(f"Received signal {signum}; shutting down")
        sessions.release()
        sys.exit(0)

    signal.signal(signal.SIGTERM, _handler)
    signal.signal(signal.SIGINT, _handler)
    atexit.register(sessions.release)


def build_dispatcher(config: dict) -> Dispatcher:
    return Dispatcher(
        catalog=build_catalog(),
        handlers=build_handlers(),
        sessions=SessionManager(config),
        busy_policy=config["busy_policy"],
    )


def main() -> int:
    load_env_file()
    try:
        config = get_env_config()
    except EnvironmentError as e:
        configure_logging("ERROR")
        logger.critical(f"Invalid configuration: {e}")
        return 2

    configure_logging(config["log_level"])
    dispatcher = build_dispatcher(config)
    install_signal_handlers(dispatcher.sessions)

    try:
        asyncio.run(serve(dispatcher))
    except Exception:
        logger.critical("MCP stdio transport failed", exc_info=True)
        return 1
    finally:
        dispatcher.sessions.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())
