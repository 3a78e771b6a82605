"""Pydantic models for validated Claude Code log entries."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageRole(str, Enum):
    """Speaker of a logged message (also the entry `type` vocabulary)."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class LogMessage(BaseModel):
    """The nested `message` object of a log entry."""

    model_config = ConfigDict(extra="ignore")

    role: MessageRole = Field(..., description="Who produced the message")
    content: str = Field(..., description="Plain-text message content")


class LogEntry(BaseModel):
    """A single v1.0 Claude Code log line."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: MessageRole = Field(..., description="Entry type")
    message: LogMessage = Field(..., description="The logged message")
    timestamp: str = Field(..., description="ISO 8601 timestamp as written by Claude Code")
    session_id: str = Field(..., alias="sessionId", description="Claude Code session ID")
    cwd: str = Field(..., description="Working directory of the session")

    @classmethod
    def from_validated(cls, entry: dict[str, Any]) -> "LogEntry":
        """Build a model from an entry that already passed schema validation."""
        return cls.model_validate(entry)

    @property
    def is_user_prompt(self) -> bool:
        return self.type is MessageRole.USER and self.message.role is MessageRole.USER
