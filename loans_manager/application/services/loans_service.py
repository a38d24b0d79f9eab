"""
LoansService - Read side for loans.

Reads need no validation or mutation, so the HTTP layer calls this directly
instead of going through the CommandBus. No page-size checks happen here;
the caller enforces the configured maximum before calling in.
"""

from typing import Optional

from loans_manager.domain.entities.loan import Loan
from loans_manager.domain.ports.repositories import LoanRepository
from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId


class LoansService:
    def __init__(self, loan_repository: LoanRepository):
        self._loan_repository = loan_repository

    async def get(self, loan_id: LoanId) -> Optional[Loan]:
        return await self._loan_repository.get(loan_id)

    async def get_page(self, offset: int, take: int) -> list[Loan]:
        return await self._loan_repository.get_page(offset, take)

    async def get_borrowers(self, offset: int, take: int) -> list[str]:
        """Distinct ids of users that borrowed at least once."""
        return await self._loan_repository.get_borrower_ids(offset, take)

    async def get_lenders(self, offset: int, take: int) -> list[str]:
        """Distinct ids of users that lent at least once."""
        return await self._loan_repository.get_lender_ids(offset, take)

    async def get_user_loans(
        self, user_id: UserId, offset: int, take: int
    ) -> list[Loan]:
        """Loans where the user is the borrower."""
        return await self._loan_repository.get_by_borrower(user_id, offset, take)

    async def get_lender_loans(
        self, user_id: UserId, offset: int, take: int
    ) -> list[Loan]:
        """Loans where the user is the lender."""
        return await self._loan_repository.get_by_lender(user_id, offset, take)
