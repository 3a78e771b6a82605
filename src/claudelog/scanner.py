"""
Scan Claude Code JSONL log files through the schema validator.

Claude Code writes one JSON document per line under
~/.claude/projects/<project-hash>/*.jsonl. Scanning decodes every line,
validates it and keeps the entries that match a supported schema.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from claudelog.data.schemas import LogEntry
from claudelog.schema import validate_log_entry

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Per-file validation summary."""

    path: Path
    entries: list[LogEntry] = field(default_factory=list)
    total_lines: int = 0
    skipped: int = 0  # Unknown format
    malformed: int = 0  # Not JSON
    unsupported: int = 0  # Known shape, unsupported version
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> int:
        return len(self.entries)

    @property
    def clean(self) -> bool:
        """True when every non-blank line validated."""
        return self.skipped == 0 and self.malformed == 0 and self.unsupported == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "total_lines": self.total_lines,
            "valid": self.valid,
            "skipped": self.skipped,
            "malformed": self.malformed,
            "unsupported": self.unsupported,
            "warnings": list(self.warnings),
        }


def find_log_files(projects_dir: Path | str) -> list[Path]:
    """
    Find Claude Code log files.

    Args:
        projects_dir: Claude projects directory (one subdirectory per project)

    Returns:
        Sorted list of *.jsonl paths, empty if the directory doesn't exist
    """
    projects_dir = Path(projects_dir)
    if not projects_dir.is_dir():
        return []
    return sorted(projects_dir.glob("*/*.jsonl"))


def scan_log_file(path: Path | str) -> ScanResult:
    """
    Validate every line of a JSONL log file.

    Args:
        path: Path to the JSONL file

    Returns:
        ScanResult with the valid entries and per-category counts

    Raises:
        OSError: If the file cannot be opened
    """
    path = Path(path)
    result = ScanResult(path=path)

    with open(path, "rb") as f:
        for lineno, raw_bytes in enumerate(f, start=1):
            context = f"{path}:{lineno}"
            try:
                raw = raw_bytes.decode("utf-8").strip()
            except UnicodeDecodeError as e:
                result.total_lines += 1
                result.malformed += 1
                result.warnings.append(f"UTF-8 decode error ({context}): {e}")
                logger.debug(f"UTF-8 decode failed at {context}: {e}")
                continue
            if not raw:
                continue
            result.total_lines += 1

            try:
                decoded = json.loads(raw)
            except json.JSONDecodeError as e:
                result.malformed += 1
                result.warnings.append(f"JSON decode error ({context}): {e}")
                logger.debug(f"JSON parse failed at {context}: {e}")
                continue

            validation = validate_log_entry(decoded, context=context)
            if validation.is_valid:
                result.entries.append(LogEntry.from_validated(decoded))
                continue

            if validation.version is None:
                result.skipped += 1
            else:
                result.unsupported += 1
            result.warnings.append(validation.warning)
            logger.debug(f"Schema validation failed: {validation.warning}")

    logger.info(
        f"Scanned {path}: {result.valid}/{result.total_lines} valid, "
        f"{result.skipped} skipped, {result.malformed} malformed, {result.unsupported} unsupported"
    )
    return result


def scan_paths(paths: Iterable[Path | str]) -> list[ScanResult]:
    """Scan several log files in order."""
    return [scan_log_file(p) for p in paths]


__all__ = ["ScanResult", "find_log_files", "scan_log_file", "scan_paths"]
