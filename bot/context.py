"""
Invocation context passed to commands and inhibitors.
"""

from dataclasses import dataclass
from typing import Any, Optional

import discord


@dataclass
class Context:
    """
    One command invocation.

    Attributes:
        client: The bot client. Must expose a ``logger`` with ``warning``.
        is_dm: Whether the invocation came from a direct message channel
        guild: The originating guild, or None outside of guilds
        message: The originating message, if any
    """

    client: Any
    is_dm: bool = False
    guild: Optional[Any] = None
    message: Optional[Any] = None

    @classmethod
    def from_message(cls, client: Any, message: discord.Message) -> "Context":
        """Build a context from an incoming discord message."""
        return cls(
            client=client,
            is_dm=isinstance(message.channel, discord.DMChannel),
            guild=message.guild,
            message=message,
        )
