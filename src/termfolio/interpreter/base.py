"""Command interpreter for the shell.

Turns a submitted line into a ResolvedAction and applies that action to
the history. Resolution is total: every string maps to exactly one of
noop, reset, dispatch or error, and nothing here raises for user input.
"""

from __future__ import annotations

import logging

from termfolio.content.source import ContentSource
from termfolio.domain.models import (
    ActionKind,
    HistoryEntry,
    OutputKind,
    OutputLine,
    ResolvedAction,
    SessionState,
)
from termfolio.interpreter.commands import CLEAR_COMMAND, NOT_FOUND_HINT, CommandRegistry
from termfolio.session import history as history_store

logger = logging.getLogger(__name__)


def normalize(raw: str) -> str:
    """Lookup key for a submitted line: trimmed and lower-cased.

    Arguments are not parsed; ``help me`` is looked up as ``help me``.
    """
    return raw.strip().lower()


def not_found_lines(normalized: str) -> tuple[OutputLine, ...]:
    return (
        OutputLine(content=f"Command not found: {normalized}", kind=OutputKind.ERROR),
        OutputLine(content=NOT_FOUND_HINT, kind=OutputKind.TEXT),
    )


class Interpreter:
    """Resolves submitted lines against a CommandRegistry.

    Example usage::

        interpreter = Interpreter(CommandRegistry(), content)
        action = interpreter.resolve("  HELP ")
        history = interpreter.apply(history, action)
    """

    def __init__(self, registry: CommandRegistry, content: ContentSource) -> None:
        self._registry = registry
        self._content = content

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def content(self) -> ContentSource:
        return self._content

    def resolve(self, raw: str) -> ResolvedAction:
        """Decide what a submitted line does without touching any state."""
        normalized = normalize(raw)

        if not normalized:
            return ResolvedAction(kind=ActionKind.NOOP, raw=raw, normalized=normalized)

        if normalized == CLEAR_COMMAND:
            return ResolvedAction(kind=ActionKind.RESET, raw=raw, normalized=normalized)

        command = self._registry.get(normalized)
        if command is not None and command.handler is not None:
            lines = command.handler(self._content)
            logger.debug("Dispatched %r -> %d lines", normalized, len(lines))
            return ResolvedAction(
                kind=ActionKind.DISPATCH, raw=raw, normalized=normalized, lines=lines
            )

        logger.debug("Command not found: %r", normalized)
        return ResolvedAction(
            kind=ActionKind.ERROR,
            raw=raw,
            normalized=normalized,
            lines=not_found_lines(normalized),
        )

    @staticmethod
    def apply(
        history: tuple[HistoryEntry, ...], action: ResolvedAction
    ) -> tuple[HistoryEntry, ...]:
        """Apply a resolved action: reset replaces, everything else appends one entry."""
        if action.kind is ActionKind.RESET:
            return history_store.reset()
        entry = HistoryEntry(raw_command=action.raw, lines=action.lines)
        return history_store.append_entry(history, entry)

    def execute(self, state: SessionState, raw: str) -> SessionState:
        """Run a line against the history, leaving buffer, cursor and draft alone."""
        action = self.resolve(raw)
        return state.model_copy(update={"history": self.apply(state.history, action)})

    def new_session(self) -> SessionState:
        """Fresh state whose history holds only the startup banner."""
        banner = self._registry.banner(self._content)
        return SessionState(history=(history_store.banner_entry(banner),))
