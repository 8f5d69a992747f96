"""
Display configuration for the status line.

Colors, glyphs and external command names are fixed constants. There is
no config file; an alternative StatuslineConfig can only be passed in
explicitly (mostly by tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Catppuccin palette, 256-color mode
DEFAULT_COLORS: Mapping[str, str] = MappingProxyType({
    "branch": "\x1b[38;5;111m",  # blue
    "added": "\x1b[38;5;151m",  # green
    "removed": "\x1b[38;5;211m",  # pink
    "model": "\x1b[38;5;183m",  # mauve
    "tokens": "\x1b[38;5;216m",  # peach
    "reset": "\x1b[0m",
})

FILLED_GLYPH = "▰"
EMPTY_GLYPH = "▱"

NO_BRANCH = "no-git"


@dataclass(frozen=True)
class StatuslineConfig:
    """Immutable display constants used by every pipeline stage."""

    colors: Mapping[str, str] = field(default_factory=lambda: DEFAULT_COLORS)
    filled_glyph: str = FILLED_GLYPH
    empty_glyph: str = EMPTY_GLYPH
    bar_segments: int = 5
    percent_per_segment: int = 20
    no_branch: str = NO_BRANCH
    git_command: str = "git"
    diff_command: str = "diff"
    separator: str = " | "

    def color(self, segment: str) -> str:
        """Escape sequence for a segment name ("reset" included)."""
        return self.colors[segment]


# Default configuration instance
default_config = StatuslineConfig()
