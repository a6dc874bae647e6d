"""Command-line interface for cut-and-run."""

import argparse
import logging
import sys

from cut_and_run.errors import EX_OK, EX_USAGE, CutAndRunError
from cut_and_run.runner import run
from cut_and_run.runner.execution import THREAD_COUNT_ENV, get_thread_count

logger = logging.getLogger(__name__)


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with EX_USAGE."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


LOG_FORMAT = "%(levelname)s: [%(threadName)s] %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr, tagged with the pool thread that wrote them."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = UsageArgumentParser(
        prog="cut-and-run",
        usage=(
            f"[env {THREAD_COUNT_ENV}=#] %(prog)s [--log-level LEVEL] "
            "input_file command output_stem [extension]"
        ),
        description=(
            "Split a text file into line-aligned pieces and pipe each piece "
            "through its own copy of a command, all at once."
        ),
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file",
    )

    parser.add_argument(
        "command",
        help="Shell command that reads standard input and writes standard output",
    )

    parser.add_argument(
        "output_stem",
        help="Output path prefix; worker numbers are appended (/dev/null is used as-is)",
    )

    parser.add_argument(
        "extension",
        nargs="?",
        default="",
        help="Suffix appended after the worker number (default: none)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        # Read before any file is opened.
        thread_count = get_thread_count()

        run(
            input_path=args.input_file,
            command=args.command,
            stem=args.output_stem,
            extension=args.extension,
            thread_count=thread_count,
        )
    except CutAndRunError as exc:
        logger.error("%s", exc)
        return exc.exit_code

    return EX_OK


if __name__ == "__main__":
    sys.exit(main())
