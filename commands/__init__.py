"""
Command system: commands, inhibitors and dispatch.
"""

from .command import (
    Command,
    CommandOptions,
    command,
    create_inhibiting_decorator,
    dm_only,
    guild_only,
    inhibit,
)
from .dispatcher import CommandDispatcher
from .inhibitors import Inhibitor, dm_only_inhibitor, guild_only_inhibitor
from .module import Module

__all__ = [
    "Command",
    "CommandOptions",
    "command",
    "create_inhibiting_decorator",
    "dm_only",
    "guild_only",
    "inhibit",
    "CommandDispatcher",
    "Inhibitor",
    "dm_only_inhibitor",
    "guild_only_inhibitor",
    "Module",
]
