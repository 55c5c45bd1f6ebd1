import argparse
import logging
from typing import Optional

from dotenv import load_dotenv

from thinktool.config import Settings
from thinktool.runtime.event_logger import EventLogger, configure_logging
from thinktool.server import build_server


def main(argv: Optional[list] = None) -> int:
    load_dotenv()  # THINKTOOL_* from .env

    parser = argparse.ArgumentParser(
        prog="think-tool",
        description="MCP stdio server exposing think / get_thoughts / clear_thoughts",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override THINKTOOL_LOG_LEVEL (default INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also append JSON log lines to this file",
    )
    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["THINKTOOL_LOG_LEVEL"] = args.log_level
    if args.log_file:
        overrides["THINKTOOL_LOG_FILE"] = args.log_file
    settings = Settings(**overrides)

    logger = configure_logging(settings.THINKTOOL_LOG_LEVEL, settings.log_file)
    events = EventLogger(logger)

    server = build_server(settings)
    events.log(
        "starting mcp stdio server ...",
        name=settings.THINKTOOL_SERVER_NAME,
        version=settings.THINKTOOL_SERVER_VERSION,
    )
    try:
        server.run(transport="stdio")
    except Exception as e:
        events.log("failed to run server", level=logging.ERROR, error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    import sys as _sys
    _sys.exit(main())
