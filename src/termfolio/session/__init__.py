"""Session state machine for termfolio.

Public API:
    history -- Pure functions over the append-only transcript
    handle_key -- Key-event transition function (InputController)
    ShellSession -- Single owner and mutator of one SessionState
"""

from termfolio.session import history

__all__ = ["history", "handle_key", "ShellSession", "UnknownCommandError"]


def __getattr__(name: str) -> object:
    """Lazy import for modules that depend on the interpreter."""
    if name == "handle_key":
        from termfolio.session.input import handle_key
        return handle_key
    if name == "ShellSession":
        from termfolio.session.shell import ShellSession
        return ShellSession
    if name == "UnknownCommandError":
        from termfolio.session.shell import UnknownCommandError
        return UnknownCommandError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
