"""Command dispatch for hosts that drive the engine with text commands."""

from .base import CommandBus, CommandContext, CommandResult, create_context
from .handlers import MENU, CommandDispatcher, dispatch, render_index

__all__ = [
    "CommandBus",
    "CommandContext",
    "CommandDispatcher",
    "CommandResult",
    "MENU",
    "create_context",
    "dispatch",
    "render_index",
]
