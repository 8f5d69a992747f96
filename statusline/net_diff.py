"""
Net lines added/removed during a session.

Compares the first known original of every file edited in the session
with what is on disk now, using the system diff tool. Intermediate edits
cancel out: only "before the first edit" and "now" are compared.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .config import StatuslineConfig, default_config
from .runner import CommandRunner, SubprocessRunner
from .transcript_parser import collect_file_originals

logger = logging.getLogger(__name__)


class DiffError(RuntimeError):
    """The diff tool reported trouble (exit status above 1)."""


@dataclass
class DiffTotals:
    """Accumulated added/removed line counts."""

    added: int = 0
    removed: int = 0

    def __add__(self, other: "DiffTotals") -> "DiffTotals":
        return DiffTotals(self.added + other.added, self.removed + other.removed)


def count_diff_markers(output: str) -> DiffTotals:
    """
    Count changed lines in normal-format diff output.

    ">" lines exist only in the second (current) file, "<" lines only in
    the first (original) one. Hunk headers and "---" separators are ignored.
    """
    totals = DiffTotals()
    for line in output.split("\n"):
        if line.startswith(">"):
            totals.added += 1
        elif line.startswith("<"):
            totals.removed += 1
    return totals


def compute_diff(
    original_path: str | Path,
    current_path: str | Path,
    runner: CommandRunner,
    config: StatuslineConfig = default_config,
) -> DiffTotals:
    """
    Diff two files on disk.

    Raises:
        DiffError: If diff exits with a status other than 0 (same) or 1 (different)
        OSError: If the diff executable cannot be run
    """
    result = runner.run(config.diff_command, [str(original_path), str(current_path)])
    if result.returncode not in (0, 1):
        raise DiffError(f"{config.diff_command} exited with {result.returncode} for {current_path}")
    return count_diff_markers(result.stdout)


def count_removed_lines(content: str) -> int:
    """Number of non-empty lines in content (a deleted file's contribution)."""
    return len([line for line in content.split("\n") if line])


def calculate_net_diff(
    transcript_path: str | Path,
    runner: CommandRunner | None = None,
    config: StatuslineConfig = default_config,
) -> DiffTotals:
    """
    Total net diff over every file the session edited.

    A missing or unreadable transcript gives zero totals. A file that no longer exists
    counts all non-empty lines of its original as removed. A file that
    cannot be compared contributes nothing; the rest are still counted.

    Args:
        transcript_path: Path to the session transcript
        runner: Command runner for diff (defaults to SubprocessRunner)
        config: Display configuration

    Returns:
        DiffTotals summed across all tracked files
    """
    originals = collect_file_originals(transcript_path)
    if not originals:
        return DiffTotals()

    runner = runner or SubprocessRunner()
    totals = DiffTotals()

    tmp_dir = Path(tempfile.mkdtemp(prefix="statusline-"))
    try:
        tmp_original = tmp_dir / "original"

        for file_path, original in originals.items():
            try:
                if Path(file_path).exists():
                    tmp_original.write_text(original, encoding="utf-8", newline="")
                    totals += compute_diff(tmp_original, file_path, runner, config)
                else:
                    totals.removed += count_removed_lines(original)
            except (OSError, UnicodeError, DiffError) as e:
                logger.debug(f"Skipping {file_path}: {e}")
    finally:
        shutil.rmtree(tmp_dir, ignore_errors=True)

    return totals


__all__ = [
    "DiffError",
    "DiffTotals",
    "calculate_net_diff",
    "compute_diff",
    "count_diff_markers",
    "count_removed_lines",
]
