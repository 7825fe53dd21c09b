"""Typewriter console renderer for the REPL.

Observes a ShellSession and writes each appended entry to a text stream,
revealing every row no earlier than its delay after the entry arrived.
Entries are written strictly one after another, so rows from different
submissions never interleave. Reveals are not cancellable: a ``clear``
that arrives while earlier entries are pending is shown after them.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import TextIO

from termfolio.content.source import Identity
from termfolio.domain.models import HistoryEntry, OutputKind
from termfolio.render.schedule import DEFAULT_STEP_MS
from termfolio.render.text import render_entry
from termfolio.session.shell import SessionObserver

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"

# ANSI styles per line kind
KIND_STYLES: dict[OutputKind, str] = {
    OutputKind.TEXT: "",
    OutputKind.COMMAND: "\x1b[1m",
    OutputKind.ERROR: "\x1b[31m",
    OutputKind.BANNER: "\x1b[32m",
    OutputKind.LINK: "\x1b[36m",
}
RESET_STYLE = "\x1b[0m"


class TypewriterConsole(SessionObserver):
    """Queues history changes and plays them back with reveal delays.

    Example usage::

        console = TypewriterConsole(identity)
        session.subscribe(console)
        session.submit_line("help")
        await console.flush()
    """

    def __init__(
        self,
        identity: Identity,
        stream: TextIO | None = None,
        step_ms: int = DEFAULT_STEP_MS,
        color: bool = True,
        echo: bool = True,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._identity = identity
        self._stream = stream or sys.stdout
        self._step_ms = step_ms
        self._color = color
        self._echo = echo
        self._sleep = sleep
        self._pending: list[HistoryEntry | None] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def on_append(self, entry: HistoryEntry) -> None:
        self._pending.append(entry)

    def on_reset(self) -> None:
        self._pending.append(None)

    async def flush(self) -> None:
        """Play back every queued change in arrival order."""
        while self._pending:
            item = self._pending.pop(0)
            if item is None:
                self._write(CLEAR_SCREEN if self._color else "\n")
            else:
                await self.show(item)

    async def show(self, entry: HistoryEntry) -> None:
        """Write one entry, waiting out each row's reveal delay."""
        elapsed = 0
        for row in render_entry(entry, self._identity, self._step_ms, echo=self._echo):
            # Never reorder: a row waits for the later of its own delay
            # and the delay of the row before it
            wait = row.delay_ms - elapsed
            if wait > 0:
                await self._sleep(wait / 1000)
                elapsed = row.delay_ms
            self._write(self._style(row.text, row.kind) + "\n")

    def _style(self, text: str, kind: OutputKind) -> str:
        style = KIND_STYLES.get(kind, "")
        if not self._color or not style:
            return text
        return f"{style}{text}{RESET_STYLE}"

    def _write(self, data: str) -> None:
        self._stream.write(data)
        self._stream.flush()
