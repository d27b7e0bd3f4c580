"""
Command Dispatcher
Dispatch-time filtering and fault reporting around Command.execute
"""

from typing import Any, Optional

from commands.command import Command
from utils.error_handler import ErrorHandler, get_error_handler
from utils.logger import LoggerMixin


class CommandDispatcher(LoggerMixin):
    """Runs matched commands, skipping disabled or circuit-broken ones."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        super().__init__("Dispatcher")
        self.error_handler = error_handler or get_error_handler()

    async def dispatch(self, command: Command, ctx: Any) -> bool:
        """
        Dispatch a command in the given context.

        Args:
            command: Matched command
            ctx: Invocation context

        Returns:
            True if the command was executed (inhibitors may still have
            blocked its handler), False if it was skipped

        Raises:
            Exception: Whatever the handler raised, after it is reported
        """
        if command.disabled:
            self.debug(f"Skipping disabled command: {command.name}")
            return False

        if self.error_handler.is_circuit_broken(command.name):
            self.warning(f"Circuit breaker active for: {command.name}")
            return False

        try:
            await command.execute(ctx)
        except Exception as e:
            self.error_handler.handle_exception(e, command.name)
            raise

        return True
