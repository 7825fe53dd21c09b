"""Key-event state machine for the input line.

Every function here takes the current SessionState and returns the next
one; nothing is mutated in place. ``handle_key`` is the single entry
point used by the session owner and dispatches on the canonical key
name. Each transition also reports whether the platform's default
behavior for the key (focus change on Tab, caret jump on arrows) should
be suppressed.
"""

from __future__ import annotations

import logging

from termfolio.domain.models import KeyEvent, KeyResult, SessionState
from termfolio.interpreter.base import Interpreter
from termfolio.session.history import past_commands

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_LINE_MODIFIERS: tuple[str, ...] = ("meta", "ctrl")

# Modifiers that make a printable key a chord rather than text (shift does not)
CHORD_MODIFIERS: tuple[str, ...] = ("meta", "ctrl", "alt", "super", "cmd")


def complete(state: SessionState, interpreter: Interpreter) -> SessionState:
    """Tab: replace the buffer with the only command it is a prefix of.

    Zero or several matches leave the buffer unchanged. While browsing
    history the buffer mirrors a past command and is left alone.
    """
    if state.is_browsing:
        return state
    matches = interpreter.registry.complete(state.input_buffer)
    if len(matches) != 1:
        return state
    return state.model_copy(update={"input_buffer": matches[0]})


def submit(state: SessionState, interpreter: Interpreter) -> SessionState:
    """Enter: run the buffer verbatim, then reset the input line."""
    submitted = interpreter.execute(state, state.input_buffer)
    return submitted.model_copy(
        update={"input_buffer": "", "history_cursor": -1, "draft_buffer": ""}
    )


def clear_line(state: SessionState) -> SessionState:
    """Escape / clear-line chord: empty the buffer, keep cursor and draft."""
    return state.model_copy(update={"input_buffer": ""})


def stop_browsing(state: SessionState) -> SessionState:
    """Leave history browsing and put the saved draft back in the buffer."""
    if not state.is_browsing:
        return state
    return state.model_copy(
        update={"history_cursor": -1, "input_buffer": state.draft_buffer}
    )


def _settle(state: SessionState, commands: list[str]) -> SessionState:
    # A cursor past the oldest command no longer mirrors anything
    if state.history_cursor >= len(commands):
        return stop_browsing(state)
    return state


def history_up(state: SessionState) -> SessionState:
    """ArrowUp: step to the next older command, stopping at the oldest."""
    commands = past_commands(state.history)
    state = _settle(state, commands)
    if not commands:
        return state

    draft = state.input_buffer if state.history_cursor == -1 else state.draft_buffer
    new_index = state.history_cursor + 1
    if new_index >= len(commands):
        # No wraparound past the oldest command
        return state

    return state.model_copy(
        update={
            "history_cursor": new_index,
            "input_buffer": commands[len(commands) - 1 - new_index],
            "draft_buffer": draft,
        }
    )


def history_down(state: SessionState) -> SessionState:
    """ArrowDown: step to the next newer command, or back to the draft."""
    commands = past_commands(state.history)
    state = _settle(state, commands)
    if state.history_cursor > 0:
        new_index = state.history_cursor - 1
        return state.model_copy(
            update={
                "history_cursor": new_index,
                "input_buffer": commands[len(commands) - 1 - new_index],
            }
        )
    if state.history_cursor == 0:
        return stop_browsing(state)
    return state


def type_text(state: SessionState, text: str) -> SessionState:
    """Insert text at the caret, which always sits at the end of the buffer."""
    if not text:
        return state
    return state.model_copy(update={"input_buffer": state.input_buffer + text})


def backspace(state: SessionState) -> SessionState:
    return state.model_copy(update={"input_buffer": state.input_buffer[:-1]})


def handle_key(
    state: SessionState,
    event: KeyEvent,
    interpreter: Interpreter,
    clear_line_modifiers: list[str] | tuple[str, ...] = DEFAULT_CLEAR_LINE_MODIFIERS,
) -> KeyResult:
    """Compute the next state for a single key press."""
    key = event.name

    if key == "Tab":
        return KeyResult(state=complete(state, interpreter), prevent_default=True)

    if key == "Enter":
        return KeyResult(state=submit(state, interpreter))

    if key == "Escape" or (key.lower() == "c" and event.has_modifier(clear_line_modifiers)):
        return KeyResult(state=clear_line(state), prevent_default=True)

    if key == "ArrowUp":
        return KeyResult(state=history_up(state), prevent_default=True)

    if key == "ArrowDown":
        return KeyResult(state=history_down(state), prevent_default=True)

    # Ordinary edits
    if key == "Backspace":
        return KeyResult(state=backspace(state))
    if len(key) == 1 and key.isprintable() and not event.has_modifier(CHORD_MODIFIERS):
        return KeyResult(state=type_text(state, key))

    logger.debug("Ignoring key %r with modifiers %s", key, event.modifiers)
    return KeyResult(state=state)
