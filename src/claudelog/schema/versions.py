"""
Versioned schema descriptors for Claude Code JSONL logs.

Each known log format is described by a SchemaDescriptor record. Detection
walks SCHEMA_DESCRIPTORS in order (most recent first), so adding a format
means adding a descriptor here and placing it in the mapping, never editing
an existing one.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class SchemaVersion:
    """Identity of a detected log schema."""

    major: int
    minor: int
    detected: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SchemaDescriptor:
    """Structural rules that define one schema version."""

    version: SchemaVersion
    required_fields: tuple[str, ...]
    message_fields: tuple[str, ...]
    # Shared by the top-level `type` and `message.role`
    message_types: tuple[str, ...]
    string_fields: tuple[str, ...]

    @property
    def label(self) -> str:
        return self.version.detected


V1_0 = SchemaDescriptor(
    version=SchemaVersion(major=1, minor=0, detected="1.0"),
    required_fields=("type", "message", "timestamp", "sessionId", "cwd"),
    message_fields=("role", "content"),
    message_types=("user", "assistant", "system"),
    string_fields=("timestamp", "sessionId", "cwd"),
)

# Detection order: most recent first, first match wins
SCHEMA_DESCRIPTORS: dict[str, SchemaDescriptor] = {
    V1_0.label: V1_0,
}

SUPPORTED_VERSIONS: tuple[str, ...] = ("1.0",)


class JsonKind(str, Enum):
    """Kinds of value a decoded JSON document can hold."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OTHER = "other"  # Not a JSON value at all


def json_kind(value: Any) -> JsonKind:
    """
    Classify a value by its JSON kind.

    Total over every Python value: anything that json.loads could not
    have produced is reported as OTHER.
    """
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    return JsonKind.OTHER


__all__ = [
    "JsonKind",
    "SCHEMA_DESCRIPTORS",
    "SUPPORTED_VERSIONS",
    "SchemaDescriptor",
    "SchemaVersion",
    "V1_0",
    "json_kind",
]
