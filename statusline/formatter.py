"""Compose the colored status line."""

from __future__ import annotations

from .config import StatuslineConfig, default_config
from .net_diff import DiffTotals


def colorize(text: str, segment: str, config: StatuslineConfig = default_config) -> str:
    """Wrap text in the segment's color and a reset."""
    return f"{config.color(segment)}{text}{config.color('reset')}"


def format_status_line(
    branch: str,
    totals: DiffTotals,
    model_name: str,
    token_info: str,
    config: StatuslineConfig = default_config,
) -> str:
    """
    Build the status line.

    Layout: branch | +added -removed | model | token gauge

    An empty token_info leaves the last segment blank (no color codes),
    but the separator before it is kept.
    """
    diff_segment = (
        colorize(f"+{totals.added}", "added", config)
        + " "
        + colorize(f"-{totals.removed}", "removed", config)
    )
    token_segment = colorize(token_info, "tokens", config) if token_info else ""

    return config.separator.join([
        colorize(branch, "branch", config),
        diff_segment,
        colorize(model_name, "model", config),
        token_segment,
    ])


__all__ = ["colorize", "format_status_line"]
