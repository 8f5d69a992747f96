"""Tests for formatter module."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from statusline.config import DEFAULT_COLORS, StatuslineConfig
from statusline.formatter import colorize, format_status_line
from statusline.net_diff import DiffTotals

BLUE = "\x1b[38;5;111m"
GREEN = "\x1b[38;5;151m"
PINK = "\x1b[38;5;211m"
MAUVE = "\x1b[38;5;183m"
PEACH = "\x1b[38;5;216m"
RESET = "\x1b[0m"


class TestColorize:

    def test_wraps_in_color_and_reset(self):
        assert colorize("main", "branch") == f"{BLUE}main{RESET}"

    def test_custom_palette(self):
        config = StatuslineConfig(colors={"branch": "<b>", "reset": "</b>"})
        assert colorize("main", "branch", config) == "<b>main</b>"


class TestFormatStatusLine:
    """Tests for format_status_line()."""

    def test_full_line(self):
        line = format_status_line(
            "main", DiffTotals(12, 3), "Sonnet", "▰▰▱▱▱ 5k/10k tokens",
        )

        assert line == (
            f"{BLUE}main{RESET} | "
            f"{GREEN}+12{RESET} {PINK}-3{RESET} | "
            f"{MAUVE}Sonnet{RESET} | "
            f"{PEACH}▰▰▱▱▱ 5k/10k tokens{RESET}"
        )

    def test_without_token_info(self):
        """The token segment is blank but still joined."""
        line = format_status_line("no-git", DiffTotals(), "Opus", "")

        assert line == (
            f"{BLUE}no-git{RESET} | "
            f"{GREEN}+0{RESET} {PINK}-0{RESET} | "
            f"{MAUVE}Opus{RESET} | "
        )

    def test_single_line(self):
        line = format_status_line("main", DiffTotals(), "Opus", "x")
        assert "\n" not in line


class TestDefaultColors:

    def test_palette_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_COLORS["branch"] = "x"
