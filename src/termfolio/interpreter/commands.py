"""The fixed command set and the handlers that produce their output.

Each handler turns the content source into an ordered tuple of
OutputLine. Handlers never inspect link-block payloads after building
them and never decide how anything looks on screen beyond the line
kind; that mapping belongs to the renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from termfolio.content.source import ContentSource
from termfolio.domain.models import LinkBlock, OutputKind, OutputLine, ProjectCard, SocialLink

logger = logging.getLogger(__name__)

CLEAR_COMMAND = "clear"

DEFAULT_REVEAL_STEP_MS = 40

NOT_FOUND_HINT = "Type 'help' to see available commands."

SHORTCUTS: tuple[tuple[str, str], ...] = (
    ("Tab", "Auto-complete command"),
    ("↑ / ↓", "Navigate command history"),
    ("Esc / Cmd+C", "Clear current input"),
    ("Enter", "Execute command"),
)

ABOUT_BODY: tuple[str, ...] = (
    "I build things with code, write about emerging tech, and help",
    "developers ship products faster. Currently focused on AI, Web3,",
    "and the future of developer tooling.",
)

CONTACT_BODY: tuple[str, ...] = (
    "Feel free to reach out! I'm always happy to chat about new",
    "projects, collaborations, or just to say hello.",
)

Handler = Callable[[ContentSource], tuple[OutputLine, ...]]


class Command(BaseModel):
    """A registered command name and the handler producing its output.

    ``handler`` is None only for ``clear``, which the interpreter
    handles itself because it replaces history instead of appending.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = Field(default="")
    handler: Handler | None = Field(default=None, exclude=True)


# ---------------------------------------------------------------------------
# Line builders
# ---------------------------------------------------------------------------


def _text(content: str) -> OutputLine:
    return OutputLine(content=content, kind=OutputKind.TEXT)


def _box_header(title: str, width: int = 62) -> list[OutputLine]:
    return [
        _text("╔" + "═" * width + "╗"),
        _text("║  " + title.ljust(width - 2) + "║"),
        _text("╚" + "═" * width + "╝"),
    ]


def _table(headers: tuple[str, str], rows: list[tuple[str, str]], left: int = 17, right: int = 39) -> list[OutputLine]:
    def row(a: str, b: str) -> OutputLine:
        return _text(f"│  {a.ljust(left)}│  {b.ljust(right)}│")

    lines = [
        _text("┌" + "─" * (left + right + 5) + "┐"),
        row(*headers),
        _text("├" + "─" * (left + 2) + "┼" + "─" * (right + 2) + "┤"),
    ]
    lines.extend(row(a, b) for a, b in rows)
    lines.append(_text("└" + "─" * (left + right + 5) + "┘"))
    return lines


def social_block(content: ContentSource) -> OutputLine:
    """One link-block line with every social entry in insertion order."""
    items = tuple(SocialLink(platform=p, value=v) for p, v in content.social.items())
    return OutputLine(content=LinkBlock(items=items), kind=OutputKind.LINK)


def projects_block(content: ContentSource) -> OutputLine:
    """One link-block line with every project in document order."""
    items = tuple(
        ProjectCard(name=p.name, description=p.description, link=p.link)
        for p in content.projects
    )
    return OutputLine(content=LinkBlock(items=items), kind=OutputKind.LINK)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class CommandRegistry:
    """Maps the fixed set of command names to their handlers.

    Iteration order is registration order, which is also the order used
    by the help table and by tab completion.

    Example usage::

        registry = CommandRegistry()
        registry.names              # ('help', 'banner', ..., 'clear')
        registry.get("help").handler(content)
    """

    def __init__(self, reveal_step_ms: int = DEFAULT_REVEAL_STEP_MS) -> None:
        self._reveal_step_ms = reveal_step_ms
        self._commands: dict[str, Command] = {}
        self._register("help", "Show this help menu", self._help)
        self._register("banner", "Display the welcome banner", self.banner)
        self._register("about", "Learn about me", self._about)
        self._register("projects", "View my projects", self._projects)
        self._register("contact", "Get my contact information", self._contact)
        self._register(CLEAR_COMMAND, "Clear the terminal", None)

    def _register(self, name: str, description: str, handler: Handler | None) -> None:
        self._commands[name] = Command(name=name, description=description, handler=handler)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def complete(self, prefix: str) -> list[str]:
        """Return every command name starting with the lower-cased prefix."""
        needle = prefix.lower()
        return [name for name in self._commands if name.startswith(needle)]

    # -- handlers ---------------------------------------------------------

    def _help(self, content: ContentSource) -> tuple[OutputLine, ...]:
        lines = _table(
            ("COMMAND", "DESCRIPTION"),
            [(c.name, c.description) for c in self],
        )
        lines.append(_text(""))
        lines.extend(_table(("SHORTCUT", "ACTION"), list(SHORTCUTS)))
        return tuple(lines)

    def banner(self, content: ContentSource) -> tuple[OutputLine, ...]:
        """Banner art, one line each, revealed ``reveal_step_ms`` apart."""
        return tuple(
            OutputLine(content=line, kind=OutputKind.BANNER, reveal_delay_ms=i * self._reveal_step_ms)
            for i, line in enumerate(content.ascii)
        )

    def _about(self, content: ContentSource) -> tuple[OutputLine, ...]:
        lines = _box_header("ABOUT")
        lines.append(_text(""))
        lines.append(_text(content.identity.greeting))
        lines.append(_text(""))
        lines.extend(_text(t) for t in ABOUT_BODY)
        lines.append(_text(""))
        lines.append(_text("─" * 63))
        lines.append(_text(""))
        lines.append(social_block(content))
        return tuple(lines)

    def _projects(self, content: ContentSource) -> tuple[OutputLine, ...]:
        lines = _box_header("PROJECTS")
        lines.append(_text(""))
        lines.append(projects_block(content))
        return tuple(lines)

    def _contact(self, content: ContentSource) -> tuple[OutputLine, ...]:
        lines = _box_header("CONTACT")
        lines.append(_text(""))
        lines.extend(_text(t) for t in CONTACT_BODY)
        lines.append(_text(""))
        lines.append(social_block(content))
        return tuple(lines)
