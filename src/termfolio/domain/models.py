"""Core domain models for the termfolio shell.

These models represent the data flowing through the shell: output
lines produced by commands, the history entries they are grouped into,
the session state the key-event state machine transitions over, and the
key events that drive it. Everything here is immutable; transitions
build new records instead of mutating old ones.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class OutputKind(str, enum.Enum):
    """Presentation class of a single output line."""

    TEXT = "text"
    COMMAND = "command"  # Echo of the submitted command line
    ERROR = "error"
    BANNER = "banner"
    LINK = "link"  # Link-block: structured links instead of plain text


class ActionKind(str, enum.Enum):
    """What the interpreter decided to do with a submitted line."""

    NOOP = "noop"  # Blank input, appended with no output
    RESET = "reset"  # The clear command
    DISPATCH = "dispatch"  # A registered command handler ran
    ERROR = "error"  # Unresolved command


# ---------------------------------------------------------------------------
# Link-block payloads (interpreted only by the renderer)
# ---------------------------------------------------------------------------


class SocialLink(BaseModel):
    """A single social/contact handle, e.g. ('github', 'octocat')."""

    model_config = ConfigDict(frozen=True)

    item_type: Literal["social"] = "social"
    platform: str = Field(description="Platform key, e.g. 'github', 'email'")
    value: str = Field(description="Handle or address on that platform")


class ProjectCard(BaseModel):
    """A single project entry."""

    model_config = ConfigDict(frozen=True)

    item_type: Literal["project"] = "project"
    name: str
    description: str
    link: str


LinkItem = Annotated[
    Union[SocialLink, ProjectCard],
    Field(discriminator="item_type"),
]


class LinkBlock(BaseModel):
    """Opaque structured content carried by a link-kind output line."""

    model_config = ConfigDict(frozen=True)

    items: tuple[LinkItem, ...] = Field(default=(), description="Links in display order")


# ---------------------------------------------------------------------------
# Transcript Models
# ---------------------------------------------------------------------------


class OutputLine(BaseModel):
    """One line of command output.

    ``reveal_delay_ms`` is presentation timing only. When it is None the
    renderer falls back to ``index * step``.
    """

    model_config = ConfigDict(frozen=True)

    content: str | LinkBlock = Field(default="", description="Plain text or a link-block payload")
    kind: OutputKind = Field(default=OutputKind.TEXT)
    reveal_delay_ms: int | None = Field(default=None, ge=0)


class HistoryEntry(BaseModel):
    """A submitted line together with the output it produced.

    ``raw_command`` is the text exactly as submitted. It is empty only
    for the startup banner entry and for Enter on an empty buffer.
    """

    model_config = ConfigDict(frozen=True)

    raw_command: str = Field(default="")
    lines: tuple[OutputLine, ...] = Field(default=())


class ResolvedAction(BaseModel):
    """The interpreter's decision for one submitted line."""

    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    raw: str = Field(description="Input exactly as submitted")
    normalized: str = Field(description="Trimmed, lower-cased input used for lookup")
    lines: tuple[OutputLine, ...] = Field(default=())


class SessionState(BaseModel):
    """The single in-memory state record of one shell session.

    ``history_cursor`` is -1 while the visitor is editing live input and
    a most-recent-first index into the past commands while browsing.
    ``draft_buffer`` holds the live edit captured when browsing began.
    """

    model_config = ConfigDict(frozen=True)

    history: tuple[HistoryEntry, ...] = Field(default=())
    input_buffer: str = Field(default="")
    history_cursor: int = Field(default=-1, ge=-1)
    draft_buffer: str = Field(default="")

    @property
    def is_browsing(self) -> bool:
        """Whether the input buffer currently mirrors a past command."""
        return self.history_cursor >= 0


# ---------------------------------------------------------------------------
# Key Event Models
# ---------------------------------------------------------------------------

# Alternate key names accepted from clients -> canonical names
KEY_ALIASES: dict[str, str] = {
    "Up": "ArrowUp",
    "Down": "ArrowDown",
    "Esc": "Escape",
    "Return": "Enter",
    "Space": " ",
}


class KeyEvent(BaseModel):
    """A single key press, optionally with held modifiers."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Key name (e.g., 'Enter', 'Tab', 'ArrowUp', 'a')")
    modifiers: tuple[str, ...] = Field(default=(), description="Held modifiers, e.g. ('meta',)")

    @property
    def name(self) -> str:
        """Canonical key name with aliases resolved."""
        return KEY_ALIASES.get(self.key, self.key)

    def has_modifier(self, candidates: list[str] | tuple[str, ...]) -> bool:
        held = {m.lower() for m in self.modifiers}
        return any(c.lower() in held for c in candidates)


class KeyResult(BaseModel):
    """Next state plus whether the platform's default key behavior is suppressed."""

    model_config = ConfigDict(frozen=True)

    state: SessionState
    prevent_default: bool = False
