"""Append-only transcript of submitted commands and their output."""

from __future__ import annotations

from termfolio.domain.models import HistoryEntry, OutputLine


def append_entry(
    history: tuple[HistoryEntry, ...], entry: HistoryEntry
) -> tuple[HistoryEntry, ...]:
    return (*history, entry)


def reset() -> tuple[HistoryEntry, ...]:
    """The full replace performed by ``clear``."""
    return ()


def banner_entry(lines: tuple[OutputLine, ...]) -> HistoryEntry:
    """The synthetic entry shown at session start (no command echo)."""
    return HistoryEntry(raw_command="", lines=lines)


def past_commands(history: tuple[HistoryEntry, ...]) -> list[str]:
    """Non-empty raw commands, oldest first.

    Blank submissions and the banner entry have an empty raw command and
    are skipped, so they never show up while browsing with the arrows.
    """
    return [entry.raw_command for entry in history if entry.raw_command]
