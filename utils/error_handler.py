"""
Error Handler
Command fault reporting with a per-command circuit breaker
"""

import time
import traceback
from typing import Dict, Optional, Tuple

from bot.config import config
from utils.logger import get_logger

# Window over which errors are counted before the breaker trips
ERROR_WINDOW_SECONDS = 60.0


class ErrorHandler:
    """Counts command faults and blocks commands that keep failing."""

    def __init__(
        self,
        max_errors_per_minute: Optional[int] = None,
        circuit_break_seconds: Optional[float] = None,
    ):
        self.logger = get_logger("ErrorHandler")
        if max_errors_per_minute is None:
            max_errors_per_minute = config.MAX_ERRORS_PER_MINUTE
        if circuit_break_seconds is None:
            circuit_break_seconds = config.CIRCUIT_BREAK_SECONDS
        self.max_errors_per_minute = max_errors_per_minute
        self.circuit_break_seconds = circuit_break_seconds
        # context -> (window start, count)
        self.error_counts: Dict[str, Tuple[float, int]] = {}
        self.circuit_breakers: Dict[str, float] = {}

    def handle_exception(self, error: Exception, context: str = "") -> bool:
        """
        Handle an exception.

        Args:
            error: The exception that occurred
            context: Optional context string, usually the command name

        Returns:
            True if error count exceeded threshold (circuit broken)
        """
        if context:
            self.logger.error(f"[{context}] {type(error).__name__}: {error}")
        else:
            self.logger.error(f"{type(error).__name__}: {error}")

        self.logger.debug(f"Traceback:\n{''.join(traceback.format_exception(error))}")

        now = time.monotonic()
        window_start, count = self.error_counts.get(context, (now, 0))
        if now - window_start > ERROR_WINDOW_SECONDS:
            window_start, count = now, 0
        count += 1
        self.error_counts[context] = (window_start, count)

        if count >= self.max_errors_per_minute:
            self.logger.warning(f"Circuit breaker triggered for: {context}")
            self.circuit_breakers[context] = now + self.circuit_break_seconds
            return True

        return False

    def is_circuit_broken(self, context: str) -> bool:
        """Check if a context is circuit broken."""
        break_until = self.circuit_breakers.get(context)
        if not break_until:
            return False

        if time.monotonic() > break_until:
            # Circuit breaker expired
            del self.circuit_breakers[context]
            self.error_counts.pop(context, None)
            return False

        return True

    def reset(self) -> None:
        """Clear all error counts and circuit breakers."""
        self.error_counts.clear()
        self.circuit_breakers.clear()


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler
