"""
CommandBus - Routes a command to its validator and handler.

Two-phase protocol:
    result = await bus.validate(command)
    if result.is_valid:
        await bus.submit(command)

submit() does NOT re-validate. Callers own the check in between.

Routes are an explicit table keyed by the command's exact class, built once by
loans_manager.application.commands.build_command_bus().
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Mapping

from loans_manager.application.common.interfaces import (
    Command,
    CommandHandler,
    CommandValidator,
)
from loans_manager.application.common.validation import ValidationResult

logger = getLogger(__name__)


class CommandNotRegisteredError(LookupError):
    """Raised when a command type has no validator/handler route."""

    def __init__(self, command_type: type):
        super().__init__(f"No route registered for command {command_type.__name__}")
        self.command_type = command_type


@dataclass(frozen=True)
class CommandRoute:
    validator: CommandValidator
    handler: CommandHandler


class CommandBus:
    def __init__(self, routes: Mapping[type[Command], CommandRoute]):
        self._routes = dict(routes)

    def _route_for(self, command: Command) -> CommandRoute:
        route = self._routes.get(type(command))
        if route is None:
            raise CommandNotRegisteredError(type(command))
        return route

    async def validate(self, command: Command) -> ValidationResult:
        result = await self._route_for(command).validator.validate(command)
        if not result.is_valid:
            logger.info(
                f"[COMMAND BUS] {type(command).__name__} rejected: {result.codes}"
            )
        return result

    async def submit(self, command: Command) -> None:
        route = self._route_for(command)
        await route.handler.execute(command)
        logger.info(f"[COMMAND BUS] {type(command).__name__} submitted")
