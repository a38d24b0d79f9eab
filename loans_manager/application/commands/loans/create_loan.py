"""
Create Loan Command.

The id is assigned by the caller before validation and reused on submission;
neither the validator nor the handler generates one.

Validation rules (all failures are collected, in this order):
1. lender id is non-empty
2. borrower id is non-empty
3. lender exists (skipped when empty)
4. borrower exists (skipped when empty)
5. borrower id differs from lender id (blank ids compare equal)
"""

from dataclasses import dataclass
from decimal import Decimal
from logging import getLogger
from typing import Optional

from loans_manager.application.common.interfaces import (
    Command,
    CommandHandler,
    CommandValidator,
)
from loans_manager.application.common.validation import ValidationResult
from loans_manager.application.commands.loans import messages
from loans_manager.domain.entities.loan import Loan
from loans_manager.domain.ports.repositories import LoanRepository, UserRepository
from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId

logger = getLogger(__name__)


def _normalized(value: Optional[str]) -> str:
    return (value or "").strip()


def _is_blank(value: Optional[str]) -> bool:
    return not _normalized(value)


# ==================== COMMAND ====================


@dataclass(frozen=True)
class CreateLoanCommand(Command):
    id: LoanId
    borrower_id: Optional[str]
    lender_id: Optional[str]
    amount: Decimal


# ==================== VALIDATOR ====================


class CreateLoanValidator(CommandValidator[CreateLoanCommand]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def _user_exists(self, user_id: str) -> bool:
        return await self._user_repository.get_by_id(UserId(user_id)) is not None

    async def validate(self, command: CreateLoanCommand) -> ValidationResult:
        result = ValidationResult()
        lender_blank = _is_blank(command.lender_id)
        borrower_blank = _is_blank(command.borrower_id)

        if lender_blank:
            self._fail(result, "lender_id", command.lender_id,
                       messages.LENDER_NOT_NULL_OR_EMPTY)
        if borrower_blank:
            self._fail(result, "borrower_id", command.borrower_id,
                       messages.BORROWER_NOT_NULL_OR_EMPTY)

        if not lender_blank and not await self._user_exists(command.lender_id):
            self._fail(result, "lender_id", command.lender_id,
                       messages.LENDER_DOES_NOT_EXIST)
        if not borrower_blank and not await self._user_exists(command.borrower_id):
            self._fail(result, "borrower_id", command.borrower_id,
                       messages.BORROWER_DOES_NOT_EXIST)

        if _normalized(command.borrower_id) == _normalized(command.lender_id):
            self._fail(result, "borrower_id", command.borrower_id,
                       messages.BORROWER_AND_LENDER_MUST_DIFFER)

        return result

    @staticmethod
    def _fail(result: ValidationResult, field_name: str, value, code: str) -> None:
        result.add_error(field_name, value, code, messages.message_for(code))


# ==================== HANDLER ====================


class CreateLoanHandler(CommandHandler[CreateLoanCommand]):
    def __init__(self, loan_repository: LoanRepository):
        self._loan_repository = loan_repository

    async def execute(self, command: CreateLoanCommand) -> None:
        loan = Loan.create(
            loan_id=command.id,
            borrower_id=UserId(command.borrower_id),
            lender_id=UserId(command.lender_id),
            amount=command.amount,
        )
        await self._loan_repository.create(loan)
        logger.info(
            f"[LOANS] Created loan {loan.id.value}: "
            f"{loan.lender_id.value} -> {loan.borrower_id.value} ({loan.amount})"
        )
