import argparse
import logging
import os
import sys

from fileshell.config.settings import Settings
from fileshell.container import container
from fileshell.entities.session import Session
from fileshell.exceptions import ConfigurationError
from fileshell.ui.console import create_console


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fileshell",
        description="Interactive file manager: navigate and manage files with a small command set.",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Directory to start in (default: current working directory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for diagnostics on stderr (default: FILESHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--pretty",
        dest="pretty",
        action="store_true",
        default=None,
        help="Colorize prompts and errors",
    )
    parser.add_argument(
        "--plain",
        dest="pretty",
        action="store_false",
        help="Plain text output without styling",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    start_dir = args.start_dir or os.getcwd()
    if not os.path.isdir(start_dir):
        print(f"Start directory is not a directory: {start_dir}", file=sys.stderr)
        return 2

    pretty = settings.pretty if args.pretty is None else args.pretty
    dispatcher = container.create_dispatcher(
        session=Session(start_dir), console=create_console(pretty=pretty)
    )
    return dispatcher.run()


if __name__ == "__main__":
    raise SystemExit(main())
