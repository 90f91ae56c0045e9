"""Command-line entry point: create a Zoom meeting and open its link."""

import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import get_settings
from .exceptions import ZoomMeetingError
from .launcher import MeetingLauncher

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def print_error(text: str) -> None:
    """Print an error message in red on stderr."""
    err_console.print(f"[red]{escape(text)}[/red]", highlight=False)


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def main() -> None:
    """Create the meeting, then print, copy and open its join link."""
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        print_error(f"Configuration Error: {e}")
        sys.exit(1)

    setup_logging(settings.log_level)

    def announce(result):
        print("Meeting link:", result.join_url, flush=True)

    try:
        MeetingLauncher(settings).run(on_created=announce)
    except ZoomMeetingError as e:
        logger.debug("Launch failed", exc_info=e)
        print_error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
