"""Pytest fixtures for claudelog tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def valid_entry():
    """A v1.0 user entry that passes validation."""
    return {
        "type": "user",
        "message": {
            "role": "user",
            "content": "refactor the auth module",
        },
        "timestamp": "2025-01-23T14:30:00.000Z",
        "sessionId": "abc123-def456",
        "cwd": "/Users/dev/code/my-app",
    }


@pytest.fixture
def write_jsonl(tmp_path: Path):
    """Write a list of lines (dicts are JSON-encoded) to a .jsonl file."""

    def _write(lines, name: str = "session.jsonl") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line if isinstance(line, str) else json.dumps(line))
                f.write("\n")
        return path

    return _write


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CLAUDELOG_* variables so tests see defaults."""
    for var in (
        "CLAUDELOG_CONFIG",
        "CLAUDELOG_REMINDER",
        "CLAUDELOG_CLAUDE_PROJECTS_DIR",
        "CLAUDELOG_LAST_RUN_FILE",
        "CLAUDELOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
