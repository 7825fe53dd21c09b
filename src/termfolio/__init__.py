"""termfolio -- Interactive terminal-style portfolio shell.

This package implements a single-user command shell: typed tokens are
resolved against a small fixed command set and the resulting output
blocks are appended to a scrolling transcript. The interpreter and the
key-event state machine are pure; the REPL and the HTTP endpoint are
thin surfaces that feed them key events and render what they produce.
"""

__version__ = "0.1.0"
