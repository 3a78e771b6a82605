"""
Tests for JSONL log scanning.

Covers:
- Counting valid, skipped, malformed and unsupported lines
- Blank line handling
- Warning context (path:line)
- Log file discovery
"""

import json
import logging
from pathlib import Path

import pytest

from claudelog.data import LogEntry
from claudelog.scanner import ScanResult, find_log_files, scan_log_file, scan_paths
from claudelog.schema import validator as validator_module


class TestScanLogFile:
    """Tests for scan_log_file."""

    def test_all_valid(self, valid_entry, write_jsonl):
        path = write_jsonl([valid_entry, valid_entry])

        result = scan_log_file(path)

        assert result.path == path
        assert result.total_lines == 2
        assert result.valid == 2
        assert result.clean is True
        assert result.warnings == []
        assert all(isinstance(e, LogEntry) for e in result.entries)

    def test_blank_lines_skipped(self, valid_entry, write_jsonl):
        path = write_jsonl(["", valid_entry, "   ", ""])

        result = scan_log_file(path)

        assert result.total_lines == 1
        assert result.valid == 1

    def test_unknown_format_counted(self, valid_entry, write_jsonl):
        path = write_jsonl([valid_entry, {"type": "summary", "summary": "x"}])

        result = scan_log_file(path)

        assert result.valid == 1
        assert result.skipped == 1
        assert result.clean is False
        assert len(result.warnings) == 1
        assert "Unknown log format detected" in result.warnings[0]
        assert f"({path}:2)" in result.warnings[0]

    def test_malformed_json(self, valid_entry, write_jsonl):
        path = write_jsonl(["{not json", valid_entry])

        result = scan_log_file(path)

        assert result.malformed == 1
        assert result.valid == 1
        assert "JSON decode error" in result.warnings[0]
        assert f"{path}:1" in result.warnings[0]

    def test_unsupported_version(self, valid_entry, write_jsonl, monkeypatch):
        monkeypatch.setattr(validator_module, "SUPPORTED_VERSIONS", ("2.0",))
        path = write_jsonl([valid_entry])

        result = scan_log_file(path)

        assert result.unsupported == 1
        assert result.valid == 0
        assert "Unsupported schema version 1.0" in result.warnings[0]

    def test_invalid_utf8_line(self, valid_entry, tmp_path: Path):
        """Undecodable bytes only spoil their own line."""
        path = tmp_path / "session.jsonl"
        path.write_bytes(json.dumps(valid_entry).encode() + b"\n\xff\xfe garbage\n")

        result = scan_log_file(path)

        assert result.total_lines == 2
        assert result.valid == 1
        assert result.malformed == 1
        assert "UTF-8 decode error" in result.warnings[0]
        assert f"{path}:2" in result.warnings[0]

    def test_non_object_lines(self, write_jsonl):
        path = write_jsonl(["[]", "null", "42", '"text"'])

        result = scan_log_file(path)

        assert result.total_lines == 4
        assert result.skipped == 4

    def test_debug_logging(self, write_jsonl, caplog):
        path = write_jsonl([{}])

        with caplog.at_level(logging.DEBUG, logger="claudelog.scanner"):
            scan_log_file(path)

        assert "Schema validation failed" in caplog.text

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(OSError):
            scan_log_file(tmp_path / "missing.jsonl")

    def test_to_dict(self, valid_entry, write_jsonl):
        path = write_jsonl([valid_entry, "oops"])

        data = scan_log_file(path).to_dict()

        assert data["path"] == str(path)
        assert data["valid"] == 1
        assert data["malformed"] == 1
        assert len(data["warnings"]) == 1


class TestScanResult:
    """Tests for ScanResult defaults."""

    def test_empty_result_is_clean(self, tmp_path: Path):
        result = ScanResult(path=tmp_path / "x.jsonl")

        assert result.valid == 0
        assert result.clean is True


class TestScanPaths:
    """Tests for scan_paths."""

    def test_preserves_order(self, valid_entry, write_jsonl):
        first = write_jsonl([valid_entry], name="a.jsonl")
        second = write_jsonl([{}], name="b.jsonl")

        results = scan_paths([second, first])

        assert [r.path for r in results] == [second, first]


class TestFindLogFiles:
    """Tests for find_log_files."""

    def test_missing_directory(self, tmp_path: Path):
        assert find_log_files(tmp_path / "nope") == []

    def test_finds_project_logs(self, tmp_path: Path):
        (tmp_path / "proj-b").mkdir()
        (tmp_path / "proj-a").mkdir()
        b = tmp_path / "proj-b" / "s1.jsonl"
        a = tmp_path / "proj-a" / "s2.jsonl"
        b.write_text("")
        a.write_text("")
        (tmp_path / "proj-a" / "notes.txt").write_text("")
        (tmp_path / "top.jsonl").write_text("")

        assert find_log_files(tmp_path) == [a, b]
