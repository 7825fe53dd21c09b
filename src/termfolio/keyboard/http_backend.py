"""HTTP keyboard output backend.

Sends key events as HTTP requests to the termfolio endpoint.
"""

from __future__ import annotations

import logging

import httpx

from termfolio.keyboard.base import KeyboardOutput, KeyboardOutputError

logger = logging.getLogger(__name__)


class HttpKeyboardOutput(KeyboardOutput):
    """Sends key events to the termfolio HTTP endpoint."""

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the HTTP client and verify endpoint connectivity."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            resp = await self._client.get("/health")
            resp.raise_for_status()
            logger.info("Connected to endpoint at %s", self._base_url)
        except Exception as e:
            await self._client.aclose()
            self._client = None
            raise KeyboardOutputError(
                f"Failed to connect to endpoint: {e}", backend="http"
            ) from e

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Disconnected from endpoint")

    async def send_keystroke(self, key: str) -> None:
        """Send a keystroke via HTTP POST."""
        await self._post("/keystroke", {"key": key})
        logger.debug("Sent keystroke: %s", key)

    async def send_key_combo(self, modifiers: list[str], key: str) -> None:
        """Send a key combination via HTTP POST."""
        await self._post("/key-combo", {"modifiers": modifiers, "key": key})
        logger.debug("Sent key combo: %s+%s", "+".join(modifiers), key)

    async def send_text(self, text: str) -> None:
        """Send text input via HTTP POST."""
        await self._post("/text", {"text": text})
        logger.debug("Sent text: %s", text[:50])

    async def run_command(self, name: str) -> None:
        """Run a registered command directly, bypassing the input line."""
        await self._post("/command", {"name": name})
        logger.debug("Ran quick command: %s", name)

    async def fetch_screen(self) -> str:
        """Return the rendered transcript followed by the prompt line."""
        if self._client is None:
            raise KeyboardOutputError("Not connected to endpoint", backend="http")
        try:
            resp = await self._client.get("/screen")
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise KeyboardOutputError(f"HTTP request to /screen failed: {e}", backend="http") from e
        data = resp.json()
        return f"{data.get('content', '')}\n{data.get('prompt', '')}"

    async def _post(self, path: str, payload: dict) -> httpx.Response:
        """Send a POST request to the endpoint."""
        if self._client is None:
            raise KeyboardOutputError("Not connected to endpoint", backend="http")
        try:
            resp = await self._client.post(path, json=payload)
            resp.raise_for_status()
            return resp
        except httpx.HTTPError as e:
            raise KeyboardOutputError(
                f"HTTP request to {path} failed: {e}", backend="http"
            ) from e
