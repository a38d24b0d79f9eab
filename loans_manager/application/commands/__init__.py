"""
COMMANDS - Write operations

Each command has:
- Command class: frozen dataclass holding the input
- Validator class: checks the command, returns a ValidationResult
- Handler class: applies the validated command through a repository

build_command_bus() wires every command to its validator and handler.
"""

from loans_manager.application.common.command_bus import CommandBus, CommandRoute
from loans_manager.application.commands.loans import (
    CreateLoanCommand,
    CreateLoanHandler,
    CreateLoanValidator,
    RepayLoanCommand,
    RepayLoanHandler,
    RepayLoanValidator,
)
from loans_manager.domain.ports.repositories import LoanRepository, UserRepository


def build_command_bus(
    loan_repository: LoanRepository, user_repository: UserRepository
) -> CommandBus:
    return CommandBus(
        {
            CreateLoanCommand: CommandRoute(
                validator=CreateLoanValidator(user_repository),
                handler=CreateLoanHandler(loan_repository),
            ),
            RepayLoanCommand: CommandRoute(
                validator=RepayLoanValidator(loan_repository),
                handler=RepayLoanHandler(loan_repository),
            ),
        }
    )


__all__ = [
    "build_command_bus",
    "CreateLoanCommand",
    "RepayLoanCommand",
]
