"""Net-diff status line for Claude Code.

Prints the git branch, net lines changed during the session, the active
model and context window usage as a single colored line.
"""

__version__ = "0.1.0"

from .config import StatuslineConfig, default_config
from .net_diff import DiffError, DiffTotals, calculate_net_diff
from .runner import CommandResult, CommandRunner, SubprocessRunner
from .session_schema import SessionInput, StatusInputError, parse_session_input
from .token_gauge import TokenGauge, compute_gauge

__all__ = [
    "StatuslineConfig",
    "default_config",
    "DiffError",
    "DiffTotals",
    "calculate_net_diff",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    "SessionInput",
    "StatusInputError",
    "parse_session_input",
    "TokenGauge",
    "compute_gauge",
]
