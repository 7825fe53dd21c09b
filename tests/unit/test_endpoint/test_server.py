"""Tests for the HTTP endpoint server."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from termfolio.endpoint.server import create_app
from termfolio.session.shell import ShellSession


@pytest.fixture
def client(session: ShellSession) -> TestClient:
    """A test client with a pre-built session injected."""
    app = create_app(session=session)
    return TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_ok(self, client: TestClient) -> None:
        """Health check should report an active session with the banner entry."""
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["session_active"] is True
        assert data["entries"] == 1


class TestKeystrokeEndpoint:
    def test_typing_and_enter(self, client: TestClient, session: ShellSession) -> None:
        """Text then Enter should submit the line and leave the default alone."""
        assert client.post("/text", json={"text": "help"}).json()["input"] == "help"
        resp = client.post("/keystroke", json={"key": "Enter"})
        assert resp.status_code == 200
        assert resp.json()["input"] == ""
        assert resp.json()["prevented"] is False
        assert session.history[-1].raw_command == "help"

    def test_tab_completion(self, client: TestClient) -> None:
        """Tab should complete a unique prefix and report the default as prevented."""
        client.post("/text", json={"text": "pro"})
        data = client.post("/keystroke", json={"key": "Tab"}).json()
        assert data["input"] == "projects"
        assert data["prevented"] is True

    def test_history_browsing(self, client: TestClient) -> None:
        """Arrow keys should walk past commands and return to the draft."""
        for line in ("help", "about"):
            client.post("/text", json={"text": line})
            client.post("/keystroke", json={"key": "Enter"})
        client.post("/text", json={"text": "xyz"})
        data = client.post("/keystroke", json={"key": "Up"}).json()
        assert (data["input"], data["history_cursor"]) == ("about", 0)
        data = client.post("/keystroke", json={"key": "ArrowDown"}).json()
        assert (data["input"], data["history_cursor"]) == ("xyz", -1)

    def test_keystroke_missing_field(self, client: TestClient) -> None:
        """Keystroke without key field should return 422."""
        resp = client.post("/keystroke", json={})
        assert resp.status_code == 422


class TestKeyComboEndpoint:
    def test_clear_line_chord(self, client: TestClient) -> None:
        """meta+c should clear the input line."""
        client.post("/text", json={"text": "half typed"})
        resp = client.post("/key-combo", json={"modifiers": ["meta"], "key": "c"})
        assert resp.status_code == 200
        assert resp.json()["input"] == ""
        assert resp.json()["key"] == "meta+c"


class TestCommandEndpoint:
    def test_quick_command(self, client: TestClient, session: ShellSession) -> None:
        """A quick command runs without touching the typed text."""
        client.post("/text", json={"text": "draft"})
        resp = client.post("/command", json={"name": "contact"})
        assert resp.status_code == 200
        assert session.history[-1].raw_command == "contact"
        assert session.input_buffer == "draft"

    def test_unknown_quick_command(self, client: TestClient) -> None:
        """Unknown quick commands should return 400."""
        resp = client.post("/command", json={"name": "rm"})
        assert resp.status_code == 400

    def test_quick_clear_while_browsing(self, client: TestClient) -> None:
        """ArrowDown after clearing history mid-browse should return to the draft."""
        for line in ("help", "about"):
            client.post("/text", json={"text": line})
            client.post("/keystroke", json={"key": "Enter"})
        client.post("/text", json={"text": "xyz"})
        client.post("/keystroke", json={"key": "ArrowUp"})
        client.post("/keystroke", json={"key": "ArrowUp"})
        assert client.post("/command", json={"name": "clear"}).status_code == 200
        resp = client.post("/keystroke", json={"key": "ArrowDown"})
        assert resp.status_code == 200
        assert (resp.json()["input"], resp.json()["history_cursor"]) == ("xyz", -1)

    def test_quick_command_while_browsing(self, client: TestClient, session: ShellSession) -> None:
        """A quick command mid-browse ends browsing so the next ArrowUp recalls it."""
        client.post("/text", json={"text": "help"})
        client.post("/keystroke", json={"key": "Enter"})
        client.post("/keystroke", json={"key": "ArrowUp"})
        client.post("/command", json={"name": "projects"})
        assert (session.input_buffer, session.state.history_cursor) == ("", -1)
        data = client.post("/keystroke", json={"key": "ArrowUp"}).json()
        assert (data["input"], data["history_cursor"]) == ("projects", 0)

    def test_quick_command_name_case(self, client: TestClient, session: ShellSession) -> None:
        assert client.post("/command", json={"name": "Help"}).status_code == 200
        assert session.history[-1].raw_command == "help"


class TestScreenEndpoints:
    def test_screen_shows_transcript_and_prompt(self, client: TestClient) -> None:
        """The screen shows echoed commands, their output and the live prompt."""
        client.post("/text", json={"text": "nope"})
        client.post("/keystroke", json={"key": "Enter"})
        client.post("/text", json={"text": "ab"})
        data = client.get("/screen").json()
        assert "guest@termfolio $ nope" in data["content"]
        assert "Command not found: nope" in data["content"]
        assert data["prompt"] == "guest@termfolio $ ab"

    def test_history_rows_carry_kind_and_delay(self, client: TestClient) -> None:
        """History rows carry their kind and reveal delay."""
        client.post("/command", json={"name": "banner"})
        entries = client.get("/history").json()
        assert [e["command"] for e in entries] == ["", "banner"]
        rows = entries[1]["rows"]
        assert rows[0]["kind"] == "command"
        assert [r["delay_ms"] for r in rows[1:]] == [0, 40, 80]
        assert all(r["kind"] == "banner" for r in rows[1:])

    def test_clear_empties_screen(self, client: TestClient) -> None:
        """clear should leave nothing on screen."""
        client.post("/command", json={"name": "clear"})
        assert client.get("/history").json() == []
        assert client.get("/screen").json()["content"] == ""

    def test_status_clock(self, client: TestClient) -> None:
        data = client.get("/status").json()
        assert len(data["time"].split(":")) == 3
        assert data["date"]


class TestLifespan:
    def test_loads_content_on_startup(self, content_file: Path) -> None:
        """Without an injected session the lifespan loads content from disk."""
        app = create_app(content_path=content_file)
        with TestClient(app) as client:
            data = client.get("/screen").json()
            assert data["prompt"] == "nader@dabit $ "
            assert "line one" in data["content"]
