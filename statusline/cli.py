"""
Status line command.

Reads the session JSON from stdin and prints one line:

    <branch> | +<added> -<removed> | <model> | <bar> <used>k/<size>k tokens

Usage: Configured in settings.json as the "statusLine" command:
    {"statusLine": {"type": "command", "command": "statusline"}}
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import StatuslineConfig, default_config
from .formatter import format_status_line
from .git_branch import resolve_branch
from .net_diff import calculate_net_diff
from .runner import CommandRunner, SubprocessRunner
from .session_schema import SessionInput, StatusInputError, parse_session_input
from .token_gauge import format_token_info

logger = logging.getLogger(__name__)


def build_status_line(
    session: SessionInput,
    runner: CommandRunner | None = None,
    config: StatuslineConfig = default_config,
) -> str:
    """
    Run the pipeline for one parsed session input.

    Args:
        session: Validated stdin payload
        runner: Command runner shared by git and diff (defaults to SubprocessRunner)
        config: Display configuration

    Returns:
        The colored status line (without trailing newline)
    """
    runner = runner or SubprocessRunner()

    branch = resolve_branch(session.cwd, runner, config)
    totals = calculate_net_diff(session.transcript_path, runner, config)
    token_info = format_token_info(session.context_window, config)

    logger.debug(f"branch={branch} added={totals.added} removed={totals.removed}")

    return format_status_line(
        branch,
        totals,
        session.model.display_name,
        token_info,
        config,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="statusline",
        description="Print a one-line session status (branch, net diff, model, context usage)",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log diagnostics to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        session = parse_session_input(sys.stdin.read())
        line = build_status_line(session)
    except StatusInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
