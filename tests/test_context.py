"""
Tests for building a Context from a discord message.
"""

from unittest.mock import Mock

import discord

from bot.context import Context


def make_message(channel_type, guild=None):
    message = Mock()
    message.channel = Mock(spec=channel_type)
    message.guild = guild
    return message


def test_from_dm_message(client):
    message = make_message(discord.DMChannel)
    ctx = Context.from_message(client, message)

    assert ctx.is_dm is True
    assert ctx.guild is None
    assert ctx.message is message
    assert ctx.client is client


def test_from_guild_message(client):
    guild = Mock()
    ctx = Context.from_message(client, make_message(discord.TextChannel, guild))

    assert ctx.is_dm is False
    assert ctx.guild is guild

