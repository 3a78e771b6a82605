"""claudelog: schema validation and analysis reminders for Claude Code logs."""

from claudelog.config import ConfigError, EnvConfig, load_config
from claudelog.data import LogEntry, LogMessage, MessageRole
from claudelog.scanner import ScanResult, find_log_files, scan_log_file
from claudelog.schema import (
    SchemaVersion,
    ValidationResult,
    detect_schema_version,
    get_schema_warning,
    get_supported_versions,
    is_schema_supported,
    validate_log_entry,
)

__version__ = "0.1.0"
__all__ = [
    # Schema validation
    "SchemaVersion",
    "ValidationResult",
    "detect_schema_version",
    "get_schema_warning",
    "get_supported_versions",
    "is_schema_supported",
    "validate_log_entry",
    # Data types
    "LogEntry",
    "LogMessage",
    "MessageRole",
    # Scanning
    "ScanResult",
    "find_log_files",
    "scan_log_file",
    # Config
    "ConfigError",
    "EnvConfig",
    "load_config",
]
