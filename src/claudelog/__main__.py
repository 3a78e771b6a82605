"""
CLI entry point for claudelog.

Usage:
    python -m claudelog validate ~/.claude/projects/*/*.jsonl
    python -m claudelog reminder --touch
"""

from claudelog.cli import app

if __name__ == "__main__":
    app(prog_name="claudelog")
