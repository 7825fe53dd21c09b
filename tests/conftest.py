"""Shared test fixtures for the termfolio test suite.

Provides common fixtures used across the unit tests: a small content
document, the registry and interpreter built on it, and sessions in a
few useful starting states.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from termfolio.content.source import ContentSource, Identity, Project
from termfolio.domain.models import SessionState
from termfolio.interpreter.base import Interpreter
from termfolio.interpreter.commands import CommandRegistry
from termfolio.session.shell import ShellSession


# ---------------------------------------------------------------------------
# Content Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_content() -> ContentSource:
    """A content document with three banner lines, two socials and two projects."""
    return ContentSource(
        identity=Identity(username="guest", hostname="termfolio", greeting="Hi there."),
        ascii=("+-----+", "| T F |", "+-----+"),
        social={"github": "octocat", "email": "hello@example.com"},
        projects=(
            Project(name="alpha", description="First project", link="https://example.com/alpha"),
            Project(name="beta", description="Second project", link="https://example.com/beta"),
        ),
    )


@pytest.fixture
def content_file(tmp_path: Path) -> Path:
    """A content document on disk in the nested layout of the original site config."""
    path = tmp_path / "config.json"
    path.write_text(
        '{"identity": {"username": "nader", "hostname": "dabit", "greeting": "gm"},'
        ' "content": {"ascii": ["line one", "line two"],'
        ' "social": {"twitter": "dabit3", "github": "dabit3"},'
        ' "projects": [{"name": "p1", "description": "d1", "link": "https://p1.dev"}]}}',
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# Interpreter Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def interpreter(registry: CommandRegistry, sample_content: ContentSource) -> Interpreter:
    return Interpreter(registry, sample_content)


# ---------------------------------------------------------------------------
# Session Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fresh_state(interpreter: Interpreter) -> SessionState:
    """A new session: only the banner entry, empty input line."""
    return interpreter.new_session()


@pytest.fixture
def session(interpreter: Interpreter) -> ShellSession:
    return ShellSession(interpreter)


@pytest.fixture
def browsed_session(session: ShellSession) -> ShellSession:
    """A session where 'help' then 'about' were submitted and 'xyz' is being typed."""
    session.submit_line("help")
    session.submit_line("about")
    session.type_text("xyz")
    return session
