"""Renderers for the shell transcript.

Public API:
    reveal_schedule -- Effective per-line typewriter delays
    render_entry / render_transcript -- Plain-text rendering
    TypewriterConsole -- Session observer that writes to a terminal
"""

from termfolio.render.schedule import reveal_delay, reveal_schedule
from termfolio.render.text import (
    RenderedLine,
    format_clock,
    render_entry,
    render_prompt,
    render_transcript,
)

__all__ = [
    "RenderedLine",
    "TypewriterConsole",
    "format_clock",
    "render_entry",
    "render_prompt",
    "render_transcript",
    "reveal_delay",
    "reveal_schedule",
]


def __getattr__(name: str) -> type:
    """Lazy import for the console, which depends on the session package."""
    if name == "TypewriterConsole":
        from termfolio.render.console import TypewriterConsole
        return TypewriterConsole
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
