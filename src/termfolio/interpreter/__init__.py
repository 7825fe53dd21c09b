"""Command interpreter module for termfolio.

Resolves submitted lines against the fixed command set and applies the
result to the session history.

Public API:
    CommandRegistry -- The fixed command set and its handlers
    Interpreter -- resolve() / apply() / execute() over session state
"""

from termfolio.interpreter.base import Interpreter, normalize
from termfolio.interpreter.commands import CLEAR_COMMAND, Command, CommandRegistry

__all__ = ["CLEAR_COMMAND", "Command", "CommandRegistry", "Interpreter", "normalize"]
