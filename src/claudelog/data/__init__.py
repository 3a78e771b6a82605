"""Typed models for Claude Code log entries."""

from claudelog.data.schemas import LogEntry, LogMessage, MessageRole

__all__ = ["LogEntry", "LogMessage", "MessageRole"]
