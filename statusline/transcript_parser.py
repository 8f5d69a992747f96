"""
Claude Code transcript scanning for file snapshots.

The transcript is a JSONL file (one JSON object per line) that Claude Code
appends to during a session. Edit and Write tool results carry a
"toolUseResult" object with the file path, the content before the edit
("originalFile") and/or the content written ("content"). Recovering the
first snapshot per file gives the state of that file before the session
touched it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from .session_schema import TranscriptEntry

logger = logging.getLogger(__name__)


def parse_entry(line: str) -> TranscriptEntry | None:
    """
    Parse one transcript line, or skip it.

    Blank lines, invalid JSON, non-object JSON and entries whose
    toolUseResult has an unexpected shape all return None.
    """
    if not line.strip():
        return None
    try:
        return TranscriptEntry.model_validate_json(line)
    except ValidationError:
        return None


class TranscriptParser:
    """
    Scan a transcript for the earliest snapshot of every edited file.

    Usage:
        parser = TranscriptParser(transcript_path)
        originals = parser.file_originals()  # path -> pre-edit content
    """

    def __init__(self, transcript_path: str | Path):
        self.transcript_path = Path(transcript_path)

    def _read_lines(self) -> list[str]:
        """Read the transcript, dropping the empty string after a final newline."""
        if not self.transcript_path.exists():
            raise FileNotFoundError(f"Transcript not found: {self.transcript_path}")

        text = self.transcript_path.read_text(encoding="utf-8", errors="replace")
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def iter_entries(self) -> Iterator[TranscriptEntry]:
        """Yield parseable entries in file order."""
        skipped = 0
        for line in self._read_lines():
            entry = parse_entry(line)
            if entry is None:
                skipped += 1
                continue
            yield entry

        if skipped:
            logger.debug(f"Skipped {skipped} unparseable lines in {self.transcript_path}")

    def file_originals(self) -> dict[str, str]:
        """
        Map each edited file to its content before the first edit.

        Only the first snapshot of a path counts; later ones are ignored.
        A snapshot without originalFile means the session created the
        file, so its original is the empty string.

        Returns:
            Dict of file_path -> original content, in order of first appearance
        """
        originals: dict[str, str] = {}

        for entry in self.iter_entries():
            result = entry.tool_use_result
            if result is None or not result.has_snapshot:
                continue

            if result.file_path not in originals:
                originals[result.file_path] = result.original_file or ""

        return originals


def collect_file_originals(transcript_path: str | Path) -> dict[str, str]:
    """
    Load file originals from a transcript, degrading to an empty map.

    Args:
        transcript_path: Path to the session transcript

    Returns:
        Dict of file_path -> original content; empty if the transcript is
        missing or unreadable
    """
    parser = TranscriptParser(transcript_path)

    try:
        return parser.file_originals()
    except FileNotFoundError:
        return {}
    except OSError as e:
        logger.warning(f"Could not read transcript {transcript_path}: {e}")
        return {}


__all__ = [
    "TranscriptParser",
    "collect_file_originals",
    "parse_entry",
]
