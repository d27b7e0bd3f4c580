"""
Command
A user-runnable command gated by an ordered chain of inhibitors
"""

import inspect
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional

from commands.inhibitors import Inhibitor, dm_only_inhibitor, guild_only_inhibitor
from utils.errors import CommandConfigurationError

# Command handler type alias: handler(ctx) or handler(module, ctx) when bound
CommandHandler = Callable[..., Any]


@dataclass
class CommandOptions:
    """Mutable options record of a command."""

    disabled: bool = False
    aliases: List[str] = field(default_factory=list)
    inhibitors: List[Inhibitor] = field(default_factory=list)
    module: Optional[Any] = None

    def __post_init__(self):
        # Never share caller-owned lists between commands
        self.aliases = list(self.aliases)
        self.inhibitors = list(self.inhibitors)


def _inhibitor_name(inhibitor: Inhibitor) -> str:
    return getattr(inhibitor, "__name__", None) or repr(inhibitor)


def _is_module_function(module: Any, func: Any) -> bool:
    """Whether func is a plain function defined in the class body of module."""
    if not inspect.isfunction(func):
        return False
    name = getattr(func, "__name__", None)
    return any(vars(klass).get(name) is func for klass in type(module).__mro__)


def inhibit(command: "Command", *inhibitors: Inhibitor) -> "Command":
    """
    Attach inhibitors to a command.

    Args:
        command: Command to attach to
        *inhibitors: Inhibitors to append, in order

    Returns:
        The same command

    Raises:
        CommandConfigurationError: If ``command`` is not a Command
    """
    if not isinstance(command, Command):
        raise CommandConfigurationError(
            "Command-inhibiting decorators may only be used on @command decorated functions."
        )
    return command.use_inhibitor(*inhibitors)


def create_inhibiting_decorator(*inhibitors: Inhibitor) -> Callable[["Command"], "Command"]:
    """
    Create a decorator that attaches the given inhibitors to a command.

    The decorator must sit above ``@command``; applying it to anything other
    than a Command raises CommandConfigurationError immediately.
    """
    def decorator(target: "Command") -> "Command":
        return inhibit(target, *inhibitors)
    return decorator


class Command:
    """
    A user-runnable command.

    Inhibitors run in registration order before the handler. The first one
    returning a falsy value blocks the command and no later inhibitor runs.
    An inhibitor that raises is logged as a warning and treated as passing,
    so a broken inhibitor never blocks a command.

    ``options.disabled`` is not checked by ``execute``; dispatchers check it
    before calling ``execute``.
    """

    def __init__(self, name: str, handler: CommandHandler, **options: Any):
        if not isinstance(name, str) or not name:
            raise ValueError("Command name must be a non-empty string")
        self.name = name
        self.handler = handler
        self.options = CommandOptions(**options)
        # Construction-time inhibitors run before any added later
        self.inhibitors: List[Inhibitor] = list(self.options.inhibitors)

    def __repr__(self) -> str:
        return (
            f"<Command name={self.name!r} disabled={self.options.disabled} "
            f"inhibitors={len(self.inhibitors)}>"
        )

    @property
    def aliases(self) -> List[str]:
        return self.options.aliases

    @property
    def disabled(self) -> bool:
        return self.options.disabled

    @property
    def module(self) -> Optional[Any]:
        return self.options.module

    async def execute(self, ctx: Any) -> Any:
        """
        Run the command in the given context.

        Returns None without calling the handler when an inhibitor blocks.
        Handler errors propagate to the caller.
        """
        if await self.call_inhibitors(ctx):
            return None

        module = self.options.module
        result = self.handler(module, ctx) if module is not None else self.handler(ctx)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def call_inhibitors(self, ctx: Any) -> bool:
        """
        Call the inhibitors attached to the command.

        Returns:
            True if the command is inhibited
        """
        is_inhibited = False

        for inhibitor in self.inhibitors:
            try:
                result = self._call_inhibitor(inhibitor, ctx)
                if inspect.isawaitable(result):
                    result = await result
                is_inhibited = not result
            except Exception as e:
                ctx.client.logger.warning(
                    f"Error in inhibitor {_inhibitor_name(inhibitor)} "
                    f"for command {self.name}: {e} - allowing command execution."
                )
                is_inhibited = False

            if is_inhibited:
                return True

        return is_inhibited

    def _call_inhibitor(self, inhibitor: Inhibitor, ctx: Any) -> Any:
        # Functions from the module's class body take the module as receiver
        module = self.options.module
        if module is not None and _is_module_function(module, inhibitor):
            return inhibitor(module, ctx)
        return inhibitor(ctx)

    def disable(self) -> bool:
        """Dynamically disable the command."""
        self.options.disabled = True
        return self.options.disabled

    def enable(self) -> bool:
        """Dynamically enable the command."""
        self.options.disabled = False
        return self.options.disabled

    def use_inhibitor(self, *inhibitors: Inhibitor) -> "Command":
        """
        Add inhibitors to the command.

        Args:
            *inhibitors: Inhibitors to append, in order. Duplicates are kept.

        Returns:
            Self for chaining
        """
        self.inhibitors.extend(inhibitors)
        return self

    def bind(self, module: Any) -> "Command":
        """Return a copy of this command that runs with ``module`` as receiver."""
        bound = Command(self.name, self.handler)
        bound.options = replace(self.options, module=module)
        bound.inhibitors = list(self.inhibitors)
        return bound

    # Inhibit a command such that it can only run in a direct message channel.
    dm_only = staticmethod(create_inhibiting_decorator(dm_only_inhibitor))

    # Inhibit a command such that it can only run in a guild.
    guild_only = staticmethod(create_inhibiting_decorator(guild_only_inhibitor))


def command(name: Optional[str] = None, **options: Any) -> Callable[[CommandHandler], Command]:
    """
    Turn a function into a Command.

    Args:
        name: Command name (defaults to the function name)
        **options: Command options (disabled, aliases, inhibitors, module)

    Returns:
        Decorator producing a Command
    """
    def decorator(func: CommandHandler) -> Command:
        if isinstance(func, Command):
            raise CommandConfigurationError(f"{func.name} is already a command.")
        if not callable(func):
            raise CommandConfigurationError("@command may only be used on callables.")
        return Command(name or func.__name__, func, **options)
    return decorator


dm_only = Command.dm_only
guild_only = Command.guild_only
