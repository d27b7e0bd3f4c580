"""
Module
Base class for groups of commands that share a receiver
"""

import inspect
from typing import Dict, List, Optional

from commands.command import Command
from utils.errors import CommandConfigurationError
from utils.logger import LoggerMixin


class Module(LoggerMixin):
    """
    A group of commands declared as class attributes.

    Each instance gets its own bound copy of every class-level command, with
    the instance as the handler receiver::

        class Admin(Module):
            @guild_only
            @command("kick", aliases=["k"])
            async def kick(self, ctx):
                ...
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__
        super().__init__(f"Module.{self.name}")
        self.commands: Dict[str, Command] = {}

        for attr, cmd in inspect.getmembers(type(self), lambda value: isinstance(value, Command)):
            if cmd.name in self.commands:
                raise CommandConfigurationError(
                    f"Duplicate command name {cmd.name!r} in module {self.name}"
                )
            bound = cmd.bind(self)
            self.commands[bound.name] = bound
            setattr(self, attr, bound)

        self.debug(f"Loaded {len(self.commands)} commands")

    def get_command(self, name: str) -> Optional[Command]:
        """
        Get a command by name or alias.

        Args:
            name: Command name or alias

        Returns:
            Command or None if not found
        """
        cmd = self.commands.get(name)
        if cmd:
            return cmd

        for cmd in self.commands.values():
            if name in cmd.aliases:
                return cmd

        return None

    def get_all(self) -> List[Command]:
        """Get all commands of this module."""
        return list(self.commands.values())
