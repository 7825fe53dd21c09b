"""Tests for plain-text transcript rendering and reveal timing."""

from __future__ import annotations

from datetime import datetime

from termfolio.content.source import Identity
from termfolio.domain.models import (
    HistoryEntry,
    LinkBlock,
    OutputKind,
    OutputLine,
    ProjectCard,
    SocialLink,
)
from termfolio.render.schedule import reveal_delay, reveal_schedule
from termfolio.render.text import (
    format_clock,
    render_entry,
    render_link_block,
    render_prompt,
    render_transcript,
    social_url,
)

IDENTITY = Identity(username="guest", hostname="box")


class TestRevealSchedule:
    def test_default_is_index_times_step(self) -> None:
        """Lines without a delay are revealed index times step apart."""
        lines = [OutputLine(content=str(i)) for i in range(4)]
        assert [d for d, _ in reveal_schedule(lines)] == [0, 40, 80, 120]
        assert [d for d, _ in reveal_schedule(lines, step_ms=10)] == [0, 10, 20, 30]

    def test_explicit_delay_wins(self) -> None:
        """An explicit reveal delay overrides the index schedule."""
        line = OutputLine(content="x", reveal_delay_ms=500)
        assert reveal_delay(line, 3) == 500

    def test_order_is_preserved(self) -> None:
        lines = [OutputLine(content="a", reveal_delay_ms=90), OutputLine(content="b")]
        assert [line.content for _, line in reveal_schedule(lines)] == ["a", "b"]


class TestLinks:
    def test_social_urls(self) -> None:
        """Known platforms expand to their profile URLs."""
        assert social_url(SocialLink(platform="email", value="a@b.c")) == "mailto:a@b.c"
        assert social_url(SocialLink(platform="twitter", value="me")) == "https://x.com/me"
        assert social_url(SocialLink(platform="linkedin", value="me")) == "https://linkedin.com/in/me"
        assert social_url(SocialLink(platform="substack", value="me.substack.com")) == "https://me.substack.com"

    def test_unknown_platform_passes_value_through(self) -> None:
        """Unknown platforms use the value as the URL."""
        assert social_url(SocialLink(platform="mastodon", value="https://m.s/@me")) == "https://m.s/@me"

    def test_social_rows_keep_insertion_order(self) -> None:
        block = LinkBlock(items=(
            SocialLink(platform="github", value="octocat"),
            SocialLink(platform="email", value="hi@example.com"),
        ))
        rows = render_link_block(block)
        assert len(rows) == 2
        assert "GITHUB" in rows[0] and "https://github.com/octocat" in rows[0]
        assert "EMAIL" in rows[1] and "mailto:hi@example.com" in rows[1]

    def test_project_cards_strip_scheme(self) -> None:
        """Project links are shown without the https scheme."""
        block = LinkBlock(items=(
            ProjectCard(name="alpha", description="First", link="https://alpha.dev"),
            ProjectCard(name="beta", description="", link="https://beta.dev"),
        ))
        rows = render_link_block(block)
        assert rows == ["  ▸ alpha", "    First", "    alpha.dev", "", "  ▸ beta", "    beta.dev"]


class TestEntries:
    def test_prompt(self) -> None:
        assert render_prompt(IDENTITY) == "guest@box $ "

    def test_command_echo_first_and_immediate(self) -> None:
        """The command echo is the first row and has no delay."""
        entry = HistoryEntry(raw_command="help", lines=(OutputLine(content="a"), OutputLine(content="b")))
        rows = render_entry(entry, IDENTITY)
        assert rows[0].text == "guest@box $ help"
        assert rows[0].kind is OutputKind.COMMAND
        assert rows[0].delay_ms == 0
        assert [(r.text, r.delay_ms) for r in rows[1:]] == [("a", 0), ("b", 40)]

    def test_no_echo_for_banner_or_blank(self) -> None:
        """Entries with an empty command have no echo row."""
        assert render_entry(HistoryEntry(raw_command=""), IDENTITY) == []

    def test_echo_can_be_disabled(self) -> None:
        entry = HistoryEntry(raw_command="help", lines=(OutputLine(content="a"),))
        assert [r.text for r in render_entry(entry, IDENTITY, echo=False)] == ["a"]

    def test_link_rows_share_the_line_delay(self) -> None:
        """Every row expanded from a link block shares that line's delay."""
        block = LinkBlock(items=(SocialLink(platform="github", value="a"), SocialLink(platform="email", value="b")))
        entry = HistoryEntry(raw_command="x", lines=(
            OutputLine(content="head"),
            OutputLine(content=block, kind=OutputKind.LINK),
        ))
        rows = render_entry(entry, IDENTITY)
        assert [r.delay_ms for r in rows[2:]] == [40, 40]
        assert all(r.kind is OutputKind.LINK for r in rows[2:])

    def test_transcript_in_append_order(self) -> None:
        history = (
            HistoryEntry(raw_command="", lines=(OutputLine(content="BANNER"),)),
            HistoryEntry(raw_command="one", lines=(OutputLine(content="1"),)),
            HistoryEntry(raw_command="two", lines=(OutputLine(content="2"),)),
        )
        assert render_transcript(history, IDENTITY).splitlines() == [
            "BANNER", "guest@box $ one", "1", "guest@box $ two", "2",
        ]


class TestClock:
    def test_format_clock(self) -> None:
        assert format_clock(datetime(2026, 10, 17, 9, 5, 3)) == ("09:05:03", "Sat, Oct 17, 2026")
