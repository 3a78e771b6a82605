"""
Schema validation for Claude Code JSONL log entries.

Classifies an arbitrary decoded JSON value as a supported entry, an entry of
a known but unsupported schema version, or an unrecognized shape. Every
outcome is returned as data; nothing here raises for bad input.

Usage:
    from claudelog.schema import validate_log_entry

    result = validate_log_entry(json.loads(line), context="session.jsonl:42")
    if not result.is_valid:
        print(result.warning)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .versions import (
    SCHEMA_DESCRIPTORS,
    SUPPORTED_VERSIONS,
    JsonKind,
    SchemaDescriptor,
    SchemaVersion,
    json_kind,
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single log entry."""

    is_valid: bool
    version: SchemaVersion | None = None
    warning: str | None = None

    def __post_init__(self) -> None:
        if self.is_valid and (self.version is None or self.warning is not None):
            raise ValueError("valid result requires a version and no warning")
        if self.version is None and (self.is_valid or not self.warning):
            raise ValueError("result without a version must be invalid and carry a warning")

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "version": self.version.to_dict() if self.version else None,
            "warning": self.warning,
        }


def _has_fields(obj: dict[str, Any], fields: tuple[str, ...]) -> bool:
    # Presence only; None and "" still count as present
    return all(name in obj for name in fields)


def _is_enumerated(value: Any, allowed: tuple[str, ...]) -> bool:
    return json_kind(value) is JsonKind.STRING and value in allowed


def _matches_message(message: Any, descriptor: SchemaDescriptor) -> bool:
    if json_kind(message) is not JsonKind.OBJECT:
        return False
    if not _has_fields(message, descriptor.message_fields):
        return False
    if not _is_enumerated(message["role"], descriptor.message_types):
        return False
    return json_kind(message["content"]) is JsonKind.STRING


def _matches(entry: dict[str, Any], descriptor: SchemaDescriptor) -> bool:
    """Check an object against every structural rule of one descriptor."""
    if not _has_fields(entry, descriptor.required_fields):
        return False
    if not _is_enumerated(entry["type"], descriptor.message_types):
        return False
    if not _matches_message(entry["message"], descriptor):
        return False
    return all(
        json_kind(entry[name]) is JsonKind.STRING
        for name in descriptor.string_fields
        if name in entry
    )


def detect_schema_version(entry: Any) -> SchemaVersion | None:
    """
    Detect which known schema a log entry matches.

    Args:
        entry: A decoded JSONL line of unknown structure

    Returns:
        The matching schema version, or None if no descriptor matches
    """
    if json_kind(entry) is not JsonKind.OBJECT:
        return None

    for descriptor in SCHEMA_DESCRIPTORS.values():
        if _matches(entry, descriptor):
            return descriptor.version
    return None


def is_schema_supported(version: SchemaVersion) -> bool:
    """Check whether a detected schema version is fully supported."""
    return version.detected in SUPPORTED_VERSIONS


def get_schema_warning(version: SchemaVersion | None, context: str | None = None) -> str:
    """
    Build a user-facing warning for a detection outcome.

    Args:
        version: The detected schema version, or None if unknown
        context: Optional location (file, line number) appended in parentheses

    Returns:
        Warning text, or an empty string when the version is supported
    """
    suffix = f" ({context})" if context else ""

    if version is None:
        return (
            f"Unknown log format detected{suffix}. The log entry structure does not "
            "match any known Claude Code schema. This entry will be skipped."
        )

    if not is_schema_supported(version):
        return (
            f"Unsupported schema version {version.detected}{suffix}. "
            f"Supported versions: {', '.join(SUPPORTED_VERSIONS)}. "
            "This entry may not be processed correctly."
        )

    return ""


def get_supported_versions() -> tuple[str, ...]:
    """Get the supported schema version labels in declaration order."""
    return SUPPORTED_VERSIONS


def validate_log_entry(entry: Any, context: str | None = None) -> ValidationResult:
    """
    Validate a single log entry.

    This is the entry point callers should use: detection, support check and
    warning text in one call.

    Args:
        entry: A decoded JSONL line of unknown structure
        context: Optional location forwarded to the warning message

    Returns:
        ValidationResult describing the outcome
    """
    version = detect_schema_version(entry)

    if version is None:
        return ValidationResult(
            is_valid=False,
            version=None,
            warning=get_schema_warning(None, context),
        )

    if not is_schema_supported(version):
        return ValidationResult(
            is_valid=False,
            version=version,
            warning=get_schema_warning(version, context),
        )

    return ValidationResult(is_valid=True, version=version, warning=None)
