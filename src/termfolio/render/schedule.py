"""Typewriter reveal timing.

Delays are advisory presentation timing on top of an already final
output sequence. They decide when a line becomes visible, never its
content or position.
"""

from __future__ import annotations

from termfolio.domain.models import OutputLine

DEFAULT_STEP_MS = 40


def reveal_delay(line: OutputLine, index: int, step_ms: int = DEFAULT_STEP_MS) -> int:
    """Effective delay of the line at ``index`` within its entry."""
    if line.reveal_delay_ms is not None:
        return line.reveal_delay_ms
    return index * step_ms


def reveal_schedule(
    lines: tuple[OutputLine, ...] | list[OutputLine], step_ms: int = DEFAULT_STEP_MS
) -> list[tuple[int, OutputLine]]:
    """Pair every line with its effective delay, preserving order."""
    return [(reveal_delay(line, i, step_ms), line) for i, line in enumerate(lines)]
