"""The owner of one shell session.

A ShellSession holds the only SessionState of a visitor and is its only
mutator. Key presses and quick commands are applied synchronously, one
at a time, through the pure transition functions in
``termfolio.session.input``; observers (renderers) are told about every
appended entry and every reset after the transition completes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from termfolio.domain.models import HistoryEntry, KeyEvent, KeyResult, SessionState
from termfolio.interpreter.base import Interpreter, normalize
from termfolio.session import input as input_controller

logger = logging.getLogger(__name__)


class SessionObserver(ABC):
    """Receives history changes in the order they happen."""

    @abstractmethod
    def on_append(self, entry: HistoryEntry) -> None:
        """Called once for every entry appended to the history."""
        ...

    @abstractmethod
    def on_reset(self) -> None:
        """Called when ``clear`` replaces the history with nothing."""
        ...


class ShellSession:
    """Single-writer wrapper around a SessionState.

    Example usage::

        session = ShellSession(Interpreter(CommandRegistry(), content))
        session.type_text("help")
        session.press("Enter")
        session.history[-1].raw_command   # 'help'
    """

    def __init__(
        self,
        interpreter: Interpreter,
        clear_line_modifiers: list[str] | tuple[str, ...] = input_controller.DEFAULT_CLEAR_LINE_MODIFIERS,
    ) -> None:
        self._interpreter = interpreter
        self._clear_line_modifiers = tuple(clear_line_modifiers)
        self._state = interpreter.new_session()
        self._observers: list[SessionObserver] = []

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return self._state.history

    @property
    def input_buffer(self) -> str:
        return self._state.input_buffer

    def subscribe(self, observer: SessionObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: SessionObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def press(self, key: str, modifiers: list[str] | tuple[str, ...] = ()) -> KeyResult:
        """Apply one key press and return the resulting state."""
        event = KeyEvent(key=key, modifiers=tuple(modifiers))
        before = self._state
        result = input_controller.handle_key(
            before, event, self._interpreter, self._clear_line_modifiers
        )
        self._state = result.state
        logger.debug(
            "Key %s -> cursor=%d buffer=%r",
            event.name, self._state.history_cursor, self._state.input_buffer,
        )
        if event.name == "Enter":
            self._notify(before.history, self._state.history)
        return result

    def type_text(self, text: str) -> SessionState:
        """Insert text into the input line as ordinary edits."""
        self._state = input_controller.type_text(self._state, text)
        return self._state

    def submit_line(self, text: str) -> SessionState:
        """Type a whole line and press Enter."""
        self.type_text(text)
        return self.press("Enter").state

    def run_quick_command(self, name: str) -> SessionState:
        """Run a registered command directly, as the sidebar buttons do.

        The name is normalized like typed input. The input line is left
        alone unless it is browsing history; then the history it mirrors
        is about to change, so browsing ends and the draft comes back.

        Raises:
            UnknownCommandError: If ``name`` is not a registered command.
        """
        command = normalize(name)
        if command not in self._interpreter.registry:
            raise UnknownCommandError(f"Unknown command: {name}", name=name)
        before = self._state
        after = self._interpreter.execute(before, command)
        self._state = input_controller.stop_browsing(after)
        self._notify(before.history, self._state.history)
        return self._state

    def _notify(
        self, before: tuple[HistoryEntry, ...], after: tuple[HistoryEntry, ...]
    ) -> None:
        # A submission either appends exactly one entry or resets to empty
        if len(after) == len(before) + 1:
            entry = after[-1]
            logger.info("Appended entry %r (%d lines)", entry.raw_command, len(entry.lines))
            for observer in list(self._observers):
                observer.on_append(entry)
        else:
            logger.info("History cleared (%d entries dropped)", len(before))
            for observer in list(self._observers):
                observer.on_reset()


class UnknownCommandError(Exception):
    """Raised when a quick command names something outside the registry."""

    def __init__(self, message: str, name: str = "") -> None:
        super().__init__(message)
        self.name = name
