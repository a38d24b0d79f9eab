"""
Loan Repository Port - Interface for loan persistence.
Implementation: loans_manager/infrastructure/persistence/prisma_loan_repository.py

Reads never raise for missing data: get() returns None, list methods return [].
"""

from abc import ABC, abstractmethod
from typing import Optional

from loans_manager.domain.entities.loan import Loan
from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId


class LoanRepository(ABC):
    @abstractmethod
    async def get(self, loan_id: LoanId) -> Optional[Loan]: ...

    @abstractmethod
    async def get_page(self, offset: int, limit: int) -> list[Loan]:
        """Loans ordered by created_at, then id."""
        ...

    @abstractmethod
    async def get_by_borrower(
        self, user_id: UserId, offset: int, limit: int
    ) -> list[Loan]: ...

    @abstractmethod
    async def get_by_lender(
        self, user_id: UserId, offset: int, limit: int
    ) -> list[Loan]: ...

    @abstractmethod
    async def get_borrower_ids(self, offset: int, limit: int) -> list[str]:
        """Distinct borrower ids, in ascending order."""
        ...

    @abstractmethod
    async def get_lender_ids(self, offset: int, limit: int) -> list[str]:
        """Distinct lender ids, in ascending order."""
        ...

    @abstractmethod
    async def create(self, loan: Loan) -> None:
        """Raises EntityAlreadyExistsError if the id is already stored."""
        ...

    @abstractmethod
    async def update(self, loan: Loan) -> None:
        """
        Persist a mutated loan.

        A loan already stored as repaid is never overwritten: the write is
        conditional on the stored row still being active, so of two racing
        repayments only the first lands and the second raises
        DomainValidationError. Raises EntityNotFoundError if the id is not stored.
        """
        ...
