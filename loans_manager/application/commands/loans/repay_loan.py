"""Repay Loan Command."""

from dataclasses import dataclass
from logging import getLogger

from loans_manager.application.common.interfaces import (
    Command,
    CommandHandler,
    CommandValidator,
)
from loans_manager.application.common.validation import ValidationResult
from loans_manager.application.commands.loans import messages
from loans_manager.domain.exceptions import EntityNotFoundError
from loans_manager.domain.ports.repositories import LoanRepository
from loans_manager.domain.value_objects.loan_id import LoanId

logger = getLogger(__name__)


@dataclass(frozen=True)
class RepayLoanCommand(Command):
    loan_id: LoanId


class RepayLoanValidator(CommandValidator[RepayLoanCommand]):
    def __init__(self, loan_repository: LoanRepository):
        self._loan_repository = loan_repository

    async def validate(self, command: RepayLoanCommand) -> ValidationResult:
        loan_id = command.loan_id.value
        loan = await self._loan_repository.get(command.loan_id)

        if loan is None:
            code = messages.LOAN_DOES_NOT_EXIST
        elif loan.is_repaid:
            code = messages.LOAN_ALREADY_REPAID
        else:
            return ValidationResult()

        return ValidationResult.single(
            "loan_id", loan_id, code, messages.message_for(code, loan_id=loan_id)
        )


class RepayLoanHandler(CommandHandler[RepayLoanCommand]):
    def __init__(self, loan_repository: LoanRepository):
        self._loan_repository = loan_repository

    async def execute(self, command: RepayLoanCommand) -> None:
        loan = await self._loan_repository.get(command.loan_id)
        if loan is None:
            raise EntityNotFoundError(f"Loan {command.loan_id.value} not found.")

        loan.repay()
        await self._loan_repository.update(loan)
        logger.info(f"[LOANS] Repaid loan {loan.id.value} at {loan.repaid_at.isoformat()}")
