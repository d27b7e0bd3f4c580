"""
Built-in command inhibitors.

An inhibitor is a predicate over a Context, sync or async. A truthy result
lets the command run; a falsy result blocks it.
"""

from typing import Any, Awaitable, Callable, Union

Inhibitor = Callable[[Any], Union[bool, Awaitable[bool]]]


def dm_only_inhibitor(ctx: Any) -> bool:
    """Allow only invocations from a direct message channel."""
    return bool(ctx.is_dm)


def guild_only_inhibitor(ctx: Any) -> bool:
    """Allow only invocations that carry a guild."""
    return ctx.guild is not None
