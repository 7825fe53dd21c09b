"""Keyboard client module for termfolio.

Drives a remote shell session by sending key events to the HTTP
endpoint.

Public API:
    KeyboardOutput -- Abstract base class
    HttpKeyboardOutput -- HTTP backend for the termfolio endpoint
"""

from termfolio.keyboard.base import KeyboardOutput, KeyboardOutputError

__all__ = ["KeyboardOutput", "KeyboardOutputError", "HttpKeyboardOutput"]


def __getattr__(name: str) -> type:
    """Lazy import for concrete implementations that require external deps."""
    if name == "HttpKeyboardOutput":
        from termfolio.keyboard.http_backend import HttpKeyboardOutput
        return HttpKeyboardOutput
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
