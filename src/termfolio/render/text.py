"""Plain-text rendering of the transcript.

This is the only place that looks inside link-block payloads and the
only place that knows what a line kind looks like on screen.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from termfolio.content.source import Identity
from termfolio.domain.models import (
    HistoryEntry,
    LinkBlock,
    OutputKind,
    OutputLine,
    ProjectCard,
    SocialLink,
)
from termfolio.render.schedule import DEFAULT_STEP_MS, reveal_schedule

# Platform -> URL template
SOCIAL_URLS: dict[str, str] = {
    "email": "mailto:{value}",
    "github": "https://github.com/{value}",
    "linkedin": "https://linkedin.com/in/{value}",
    "twitter": "https://x.com/{value}",
    "substack": "https://{value}",
}

SOCIAL_LABELS: dict[str, str] = {
    "email": "✉ EMAIL",
    "github": "⚡ GITHUB",
    "linkedin": "💼 LINKEDIN",
    "twitter": "𝕏 TWITTER",
    "substack": "📝 SUBSTACK",
}


class RenderedLine(BaseModel):
    """A single screen row with the kind and delay of the line it came from."""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: OutputKind
    delay_ms: int = Field(default=0, ge=0)


def social_url(link: SocialLink) -> str:
    template = SOCIAL_URLS.get(link.platform.lower())
    return template.format(value=link.value) if template else link.value


def social_label(link: SocialLink) -> str:
    return SOCIAL_LABELS.get(link.platform.lower(), link.platform.upper())


def render_link_block(block: LinkBlock) -> list[str]:
    """Expand a link-block into screen rows, one or more per item."""
    rows: list[str] = []
    for item in block.items:
        if isinstance(item, SocialLink):
            rows.append(f"  {social_label(item):<12} {item.value}  <{social_url(item)}>")
        elif isinstance(item, ProjectCard):
            if rows:
                rows.append("")
            rows.append(f"  ▸ {item.name}")
            if item.description:
                rows.append(f"    {item.description}")
            rows.append(f"    {item.link.removeprefix('https://')}")
    return rows


def render_line(line: OutputLine) -> list[str]:
    if isinstance(line.content, LinkBlock):
        return render_link_block(line.content)
    return [line.content]


def render_prompt(identity: Identity) -> str:
    return f"{identity.username}@{identity.hostname} $ "


def render_entry(
    entry: HistoryEntry,
    identity: Identity,
    step_ms: int = DEFAULT_STEP_MS,
    echo: bool = True,
) -> list[RenderedLine]:
    """Rows for one history entry, in display order.

    The command echo is shown immediately and only for a non-empty raw
    command, so the startup banner and blank submissions have none.
    Pass ``echo=False`` when the terminal already shows the typed line.
    """
    rows: list[RenderedLine] = []
    if echo and entry.raw_command:
        rows.append(
            RenderedLine(
                text=render_prompt(identity) + entry.raw_command,
                kind=OutputKind.COMMAND,
            )
        )
    for delay, line in reveal_schedule(entry.lines, step_ms):
        rows.extend(
            RenderedLine(text=text, kind=line.kind, delay_ms=delay)
            for text in render_line(line)
        )
    return rows


def render_transcript(
    history: tuple[HistoryEntry, ...] | list[HistoryEntry], identity: Identity
) -> str:
    """The whole transcript as text, entries in append order."""
    return "\n".join(
        row.text for entry in history for row in render_entry(entry, identity)
    )


def format_clock(now: datetime) -> tuple[str, str]:
    """Header clock strings, e.g. ('14:03:09', 'Sat, Oct 17, 2026')."""
    return now.strftime("%H:%M:%S"), now.strftime("%a, %b %d, %Y")
