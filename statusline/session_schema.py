"""
Schema models for the status line.

Pydantic models for the JSON the prompt tool pipes to stdin and for the
single transcript field the diff accumulator reads.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class StatusInputError(ValueError):
    """Stdin is empty, not JSON, or lacks a required field."""


class CurrentUsage(BaseModel):
    """Token counts of the latest request."""

    model_config = ConfigDict(frozen=True)

    input_tokens: int = Field(default=0, ge=0)
    cache_creation_input_tokens: int = Field(default=0, ge=0)
    cache_read_input_tokens: int = Field(default=0, ge=0)

    @field_validator(
        "input_tokens",
        "cache_creation_input_tokens",
        "cache_read_input_tokens",
        mode="before",
    )
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def total(self) -> int:
        return (
            self.input_tokens
            + self.cache_creation_input_tokens
            + self.cache_read_input_tokens
        )


class ContextWindow(BaseModel):
    """Context window occupancy; the size may be missing or zero (unknown)."""

    model_config = ConfigDict(frozen=True)

    current_usage: CurrentUsage | None = None
    context_window_size: int | None = Field(default=None, ge=0)


class ModelInfo(BaseModel):
    """Active model."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    display_name: str


class SessionInput(BaseModel):
    """
    Session state read from stdin.

    cwd, transcript_path and model.display_name are required; a missing or
    mistyped value rejects the whole input.
    """

    model_config = ConfigDict(frozen=True)

    cwd: str
    transcript_path: str
    model: ModelInfo
    context_window: ContextWindow | None = None


class ToolUseResult(BaseModel):
    """File snapshot attached to an Edit/Write tool result."""

    model_config = ConfigDict(populate_by_name=True)

    file_path: str | None = Field(default=None, alias="filePath")
    original_file: str | None = Field(default=None, alias="originalFile")
    content: str | None = None

    @property
    def has_snapshot(self) -> bool:
        """True when this result names a file and carries pre- or post-edit text."""
        if not self.file_path:
            return False
        return self.original_file is not None or self.content is not None


class TranscriptEntry(BaseModel):
    """One transcript line. Everything except toolUseResult is ignored."""

    model_config = ConfigDict(populate_by_name=True)

    tool_use_result: ToolUseResult | None = Field(default=None, alias="toolUseResult")


def parse_session_input(raw: str) -> SessionInput:
    """
    Parse the stdin payload.

    Args:
        raw: Entire stdin contents

    Returns:
        Validated SessionInput

    Raises:
        StatusInputError: If the payload is empty, not JSON, or invalid
    """
    if not raw.strip():
        raise StatusInputError("No input on stdin")

    try:
        return SessionInput.model_validate_json(raw)
    except ValidationError as e:
        raise StatusInputError(f"Invalid session input: {e}") from e


__all__ = [
    "ContextWindow",
    "CurrentUsage",
    "ModelInfo",
    "SessionInput",
    "StatusInputError",
    "ToolUseResult",
    "TranscriptEntry",
    "parse_session_input",
]
