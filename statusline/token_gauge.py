"""Context window usage gauge: a glyph bar plus used/total token counts."""

from __future__ import annotations

from dataclasses import dataclass

from .config import StatuslineConfig, default_config
from .session_schema import ContextWindow


@dataclass(frozen=True)
class TokenGauge:
    """
    Derived view of context window occupancy.

    filled is not capped at the bar width: usage above capacity yields a
    bar longer than bar_segments rather than a full one.
    """

    percent: int
    filled: int
    current_k: int
    capacity_k: int

    def bar(self, config: StatuslineConfig = default_config) -> str:
        empty = max(0, config.bar_segments - self.filled)
        return config.filled_glyph * self.filled + config.empty_glyph * empty

    def render(self, config: StatuslineConfig = default_config) -> str:
        """e.g. "▰▰▱▱▱ 5k/10k tokens"."""
        return f"{self.bar(config)} {self.current_k}k/{self.capacity_k}k tokens"


def compute_gauge(
    context_window: ContextWindow | None,
    config: StatuslineConfig = default_config,
) -> TokenGauge | None:
    """
    Compute the gauge, or None when the context window size is unknown.

    Args:
        context_window: Context window block from the session input
        config: Display configuration (segment width)

    Returns:
        TokenGauge, or None if the block is absent or its size is absent/zero
    """
    if context_window is None or not context_window.context_window_size:
        return None

    capacity = context_window.context_window_size
    usage = context_window.current_usage
    current = usage.total if usage else 0

    percent = current * 100 // capacity
    return TokenGauge(
        percent=percent,
        filled=percent // config.percent_per_segment,
        current_k=current // 1000,
        capacity_k=capacity // 1000,
    )


def format_token_info(
    context_window: ContextWindow | None,
    config: StatuslineConfig = default_config,
) -> str:
    """Rendered gauge text, or "" when there is nothing to show."""
    gauge = compute_gauge(context_window, config)
    if gauge is None:
        return ""
    return gauge.render(config)


__all__ = ["TokenGauge", "compute_gauge", "format_token_info"]
