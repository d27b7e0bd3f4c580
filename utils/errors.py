"""
Error types raised by the command system.
"""


class CommandConfigurationError(Exception):
    """A command or decorator was set up incorrectly at definition time."""
