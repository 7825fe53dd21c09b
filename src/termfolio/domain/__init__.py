"""Domain models for termfolio.

This package contains all core data structures, enumerations, and value
objects used throughout the shell. All models use Pydantic v2 for
validation and serialization.
"""

from termfolio.domain.models import (
    ActionKind,
    HistoryEntry,
    KeyEvent,
    KeyResult,
    LinkBlock,
    OutputKind,
    OutputLine,
    ProjectCard,
    ResolvedAction,
    SessionState,
    SocialLink,
)

__all__ = [
    "ActionKind",
    "HistoryEntry",
    "KeyEvent",
    "KeyResult",
    "LinkBlock",
    "OutputKind",
    "OutputLine",
    "ProjectCard",
    "ResolvedAction",
    "SessionState",
    "SocialLink",
]
