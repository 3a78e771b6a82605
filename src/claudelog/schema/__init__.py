"""
Schema detection and validation for Claude Code JSONL logs.

Usage:
    from claudelog.schema import validate_log_entry, get_supported_versions

    result = validate_log_entry(entry)
    if result.is_valid:
        process(entry)
    elif result.warning:
        logger.warning(result.warning)
"""

from .validator import (
    ValidationResult,
    detect_schema_version,
    get_schema_warning,
    get_supported_versions,
    is_schema_supported,
    validate_log_entry,
)
from .versions import (
    SCHEMA_DESCRIPTORS,
    SUPPORTED_VERSIONS,
    V1_0,
    JsonKind,
    SchemaDescriptor,
    SchemaVersion,
    json_kind,
)

__all__ = [
    # Types
    "JsonKind",
    "SchemaDescriptor",
    "SchemaVersion",
    "ValidationResult",
    # Constants
    "SCHEMA_DESCRIPTORS",
    "SUPPORTED_VERSIONS",
    "V1_0",
    # Functions
    "detect_schema_version",
    "get_schema_warning",
    "get_supported_versions",
    "is_schema_supported",
    "json_kind",
    "validate_log_entry",
]
