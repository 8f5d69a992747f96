"""
Shared fixtures for status line tests.

FakeRunner stands in for git and diff so tests need neither binaries nor
repositories. With fake_diff=True it answers "diff a b" itself, producing
normal-format "<"/">" lines from difflib opcodes.
"""

import difflib
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from statusline.runner import CommandResult


_OPCODE_LETTERS = {"replace": "c", "delete": "d", "insert": "a"}


def _difflib_diff(original: str, current: str) -> CommandResult:
    a = Path(original).read_text().splitlines()
    b = Path(current).read_text().splitlines()

    out = []
    matcher = difflib.SequenceMatcher(a=a, b=b, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        out.append(f"{i1 + 1},{i2}{_OPCODE_LETTERS[tag]}{j1 + 1},{j2}")
        out.extend(f"< {line}" for line in a[i1:i2])
        if tag == "replace":
            out.append("---")
        out.extend(f"> {line}" for line in b[j1:j2])

    text = "\n".join(out) + "\n" if out else ""
    return CommandResult(stdout=text, returncode=1 if out else 0)


class FakeRunner:
    """Scripted CommandRunner that records every call."""

    def __init__(self, results=None, fake_diff=False):
        # command -> CommandResult | Exception
        self.results = dict(results or {})
        self.fake_diff = fake_diff
        self.calls = []

    def run(self, command, args, cwd=None):
        self.calls.append((command, list(args), cwd))

        if command == "diff" and self.fake_diff:
            return _difflib_diff(*args)

        outcome = self.results.get(command)
        if outcome is None:
            raise FileNotFoundError(f"No such command: {command}")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def commands(self):
        return [command for command, _, _ in self.calls]


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def write_transcript(tmp_path):
    """Write transcript lines (dicts are JSON-encoded, strings kept raw)."""

    def _write(*entries, name="transcript.jsonl"):
        path = tmp_path / name
        lines = [e if isinstance(e, str) else json.dumps(e) for e in entries]
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


def edit_entry(file_path, original=None, content=None):
    """Transcript entry for an Edit/Write tool result."""
    result = {"filePath": str(file_path)}
    if original is not None:
        result["originalFile"] = original
    if content is not None:
        result["content"] = content
    return {"type": "user", "toolUseResult": result}


@pytest.fixture
def make_edit():
    return edit_entry
