"""
Base interfaces for the command side.

Usage:
    @dataclass(frozen=True)
    class RepayLoanCommand(Command):
        loan_id: LoanId

    class RepayLoanValidator(CommandValidator[RepayLoanCommand]):
        async def validate(self, command: RepayLoanCommand) -> ValidationResult:
            ...

    class RepayLoanHandler(CommandHandler[RepayLoanCommand]):
        def __init__(self, repo: LoanRepository):
            self.repo = repo

        async def execute(self, command: RepayLoanCommand) -> None:
            loan = await self.repo.get(command.loan_id)
            loan.repay()
            await self.repo.update(loan)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from loans_manager.application.common.validation import ValidationResult


class Command(ABC):
    """Base class for write operations"""
    pass


C = TypeVar("C", bound=Command)


class CommandValidator(ABC, Generic[C]):
    @abstractmethod
    async def validate(self, command: C) -> ValidationResult:
        """Check the command against current state. Must not mutate anything."""
        ...


class CommandHandler(ABC, Generic[C]):
    @abstractmethod
    async def execute(self, command: C) -> None:
        """Apply an already validated command"""
        ...
