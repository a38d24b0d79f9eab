"""Shared building blocks for commands: interfaces, validation results, the bus."""

from loans_manager.application.common.interfaces import (
    Command,
    CommandHandler,
    CommandValidator,
)
from loans_manager.application.common.validation import (
    ValidationFailure,
    ValidationResult,
)
from loans_manager.application.common.command_bus import (
    CommandBus,
    CommandNotRegisteredError,
    CommandRoute,
)

__all__ = [
    "Command",
    "CommandHandler",
    "CommandValidator",
    "ValidationFailure",
    "ValidationResult",
    "CommandBus",
    "CommandNotRegisteredError",
    "CommandRoute",
]
