"""Command-line entry point for mdnsview.

Usage:
    mdnsview [--config PATH]
    python -m mdnsview --version
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from mdnsview import __version__
from mdnsview.constants import APP_DESCRIPTION, APP_TITLE
from mdnsview.models.state import AppSettings, ConfigLoadError, ConfigManager

KEY_BANNER = """\
keys:
  ?        show every key binding
  q        quit
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog=APP_TITLE,
        description=APP_DESCRIPTION,
        epilog=KEY_BANNER,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help=f"settings file (default: {ConfigManager.default_path()})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the dashboard.

    Exit Codes:
        0: Normal quit
        1: The terminal could not be set up
        2: Invalid arguments or settings file
    """
    args = build_parser().parse_args(argv)

    settings: AppSettings | None = None
    if args.config is not None:
        try:
            settings = ConfigManager.load(args.config)
        except ConfigLoadError as exc:
            print(f"{APP_TITLE}: {exc}", file=sys.stderr)
            return 2

    # Imported late so --help and --version do not pay for Textual.
    from mdnsview.app import MdnsViewApp

    app = MdnsViewApp(settings=settings)
    try:
        app.run()
    except OSError as exc:
        print(f"{APP_TITLE}: terminal setup failed: {exc}", file=sys.stderr)
        return 1
    return app.return_code or 0
