"""Abstract base class for sending key events to a shell session.

Clients drive a remote session the same way a visitor at a keyboard
would: single keys, modifier chords and typed text. The HTTP backend
talks to the termfolio endpoint; other transports only need to
implement this interface.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class KeyboardOutput(ABC):
    """Abstract interface for sending key events to a shell session.

    Example usage::

        async with HttpKeyboardOutput(base_url="http://localhost:8080") as kb:
            await kb.send_line("projects")
            await kb.send_keystroke("ArrowUp")
            await kb.send_key_combo(["meta"], "c")
    """

    @abstractmethod
    async def connect(self) -> None:
        """Establish the connection and verify the target is reachable.

        Raises:
            KeyboardOutputError: If connection cannot be established.
        """
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection. Safe to call more than once."""
        ...

    @abstractmethod
    async def send_keystroke(self, key: str) -> None:
        """Send a single key press.

        Args:
            key: The key to press. Recognized names are 'Enter', 'Tab',
                 'Escape', 'ArrowUp', 'ArrowDown', 'Backspace' (plus
                 the aliases 'Up', 'Down', 'Esc', 'Return') and single
                 printable characters.

        Raises:
            KeyboardOutputError: If the keystroke cannot be sent.
        """
        ...

    @abstractmethod
    async def send_key_combo(self, modifiers: list[str], key: str) -> None:
        """Send a key combination, e.g. ``(['meta'], 'c')`` to clear the line.

        Raises:
            KeyboardOutputError: If the combo cannot be sent.
        """
        ...

    @abstractmethod
    async def send_text(self, text: str) -> None:
        """Type a string into the input line. Does NOT press Enter.

        Raises:
            KeyboardOutputError: If text input fails.
        """
        ...

    async def send_line(self, text: str) -> None:
        """Type a string of text and press Enter."""
        await self.send_text(text)
        await self.send_keystroke("Enter")

    async def __aenter__(self) -> KeyboardOutput:
        """Async context manager entry -- connects to the target."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        """Async context manager exit -- disconnects from the target."""
        await self.disconnect()


class KeyboardOutputError(Exception):
    """Raised when sending key events fails."""

    def __init__(self, message: str, backend: str = "") -> None:
        super().__init__(message)
        self.backend = backend
