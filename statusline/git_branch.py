"""Current git branch for the session's working directory."""

from __future__ import annotations

import logging

from .config import StatuslineConfig, default_config
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


def resolve_branch(
    cwd: str,
    runner: CommandRunner | None = None,
    config: StatuslineConfig = default_config,
) -> str:
    """
    Get the checked-out branch name of the repository containing cwd.

    Never raises: if git is missing, cwd is not inside a repository, or
    HEAD is detached (empty output), the config's no-branch sentinel is
    returned instead.

    Args:
        cwd: Working directory to query
        runner: Command runner (defaults to SubprocessRunner)
        config: Display configuration

    Returns:
        Branch name or "no-git"
    """
    runner = runner or SubprocessRunner()

    try:
        result = runner.run(config.git_command, ["-C", cwd, "branch", "--show-current"])
    except OSError as e:
        logger.debug(f"git unavailable: {e}")
        return config.no_branch

    if result.returncode != 0:
        logger.debug(f"git exited with {result.returncode} in {cwd}")
        return config.no_branch

    branch = result.stdout.strip()
    return branch or config.no_branch


__all__ = ["resolve_branch"]
