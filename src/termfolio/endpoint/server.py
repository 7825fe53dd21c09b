"""FastAPI HTTP server hosting one shell session.

Receives key events via HTTP, feeds them to the session's state machine
and serves the rendered transcript. Requests are handled one at a time
on the event loop and each transition runs to completion, so the
session never sees overlapping mutation.

    GET  /health      -> {"status": "ok", ...}
    POST /keystroke   <- {"key": "ArrowUp"}
    POST /key-combo   <- {"modifiers": ["meta"], "key": "c"}
    POST /text        <- {"text": "help"}
    POST /command     <- {"name": "projects"}
    GET  /screen      -> rendered transcript + prompt line
    GET  /history     -> entries with per-row kind and reveal delay
    GET  /status      -> header clock
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from termfolio.content.source import ContentError, load_content
from termfolio.interpreter.base import Interpreter
from termfolio.interpreter.commands import CommandRegistry
from termfolio.render.text import format_clock, render_entry, render_prompt, render_transcript
from termfolio.session.input import DEFAULT_CLEAR_LINE_MODIFIERS
from termfolio.session.shell import ShellSession, UnknownCommandError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class KeystrokeRequest(BaseModel):
    key: str = Field(description="Key name (e.g., 'Enter', 'Tab', 'ArrowUp', 'a')")


class KeyComboRequest(BaseModel):
    modifiers: list[str] = Field(description="Modifier keys (e.g., ['meta'])")
    key: str = Field(description="Main key in the combination")


class TextInputRequest(BaseModel):
    text: str = Field(description="Text to type")


class QuickCommandRequest(BaseModel):
    name: str = Field(description="Registered command to run directly")


class KeyResponse(BaseModel):
    status: str = "ok"
    key: str
    prevented: bool = False
    input: str = ""
    history_cursor: int = -1


class EndpointStatus(BaseModel):
    status: str = "ok"
    session_active: bool = True
    entries: int = 0


class RenderedRow(BaseModel):
    text: str
    kind: str
    delay_ms: int


class RenderedEntry(BaseModel):
    command: str
    rows: list[RenderedRow]


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(
    session: ShellSession | None = None,
    content_path: Path | str = "config/content.yaml",
    reveal_step_ms: int = 40,
    clear_line_modifiers: list[str] | tuple[str, ...] = DEFAULT_CLEAR_LINE_MODIFIERS,
) -> FastAPI:
    """Create the shell endpoint application.

    Args:
        session: Optional pre-built session (for testing). When omitted
                 the content document is loaded at startup and a fresh
                 session is created.
        content_path: YAML/JSON content document to load.
        reveal_step_ms: Per-line typewriter increment.
        clear_line_modifiers: Modifiers that make 'c' clear the line.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.session is None:
            try:
                content = load_content(content_path)
            except ContentError as e:
                logger.error("Cannot start endpoint: %s", e)
                raise
            interpreter = Interpreter(CommandRegistry(reveal_step_ms=reveal_step_ms), content)
            app.state.session = ShellSession(interpreter, clear_line_modifiers=clear_line_modifiers)
        logger.info("Endpoint started (%d entries)", len(app.state.session.history))
        yield
        logger.info("Endpoint stopped")

    app = FastAPI(
        title="termfolio Endpoint",
        description="HTTP surface for the termfolio shell session",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.session = session
    app.state.reveal_step_ms = reveal_step_ms

    def _key_response(s: ShellSession, key: str, prevented: bool) -> KeyResponse:
        return KeyResponse(
            key=key,
            prevented=prevented,
            input=s.state.input_buffer,
            history_cursor=s.state.history_cursor,
        )

    @app.get("/health")
    async def health_check() -> EndpointStatus:
        s: ShellSession | None = app.state.session
        return EndpointStatus(
            session_active=s is not None,
            entries=len(s.history) if s else 0,
        )

    @app.post("/keystroke")
    async def receive_keystroke(request: KeystrokeRequest) -> KeyResponse:
        s: ShellSession = app.state.session
        result = s.press(request.key)
        return _key_response(s, request.key, result.prevent_default)

    @app.post("/key-combo")
    async def receive_key_combo(request: KeyComboRequest) -> KeyResponse:
        s: ShellSession = app.state.session
        result = s.press(request.key, request.modifiers)
        combo = "+".join([*request.modifiers, request.key])
        return _key_response(s, combo, result.prevent_default)

    @app.post("/text")
    async def receive_text(request: TextInputRequest) -> dict[str, str]:
        s: ShellSession = app.state.session
        s.type_text(request.text)
        return {"status": "ok", "length": str(len(request.text)), "input": s.input_buffer}

    @app.post("/command")
    async def run_command(request: QuickCommandRequest) -> dict[str, str]:
        s: ShellSession = app.state.session
        try:
            s.run_quick_command(request.name)
        except UnknownCommandError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        return {"status": "ok", "command": request.name, "entries": str(len(s.history))}

    @app.get("/screen")
    async def get_screen_content() -> dict[str, str]:
        s: ShellSession = app.state.session
        identity = s.interpreter.content.identity
        return {
            "content": render_transcript(s.history, identity),
            "prompt": render_prompt(identity) + s.input_buffer,
        }

    @app.get("/history")
    async def get_history() -> list[RenderedEntry]:
        s: ShellSession = app.state.session
        identity = s.interpreter.content.identity
        return [
            RenderedEntry(
                command=entry.raw_command,
                rows=[
                    RenderedRow(text=row.text, kind=row.kind.value, delay_ms=row.delay_ms)
                    for row in render_entry(entry, identity, app.state.reveal_step_ms)
                ],
            )
            for entry in s.history
        ]

    @app.get("/status")
    async def get_status() -> dict[str, str]:
        time_str, date_str = format_clock(datetime.now())
        return {"time": time_str, "date": date_str}

    return app
