"""
In-memory implementations of the repository ports.

Entities are copied on the way in and out so a caller only changes stored
state through create()/update(), the same as with a database.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterable, Optional

from loans_manager.domain.entities.loan import Loan
from loans_manager.domain.entities.user import User
from loans_manager.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from loans_manager.domain.ports.repositories import LoanRepository, UserRepository
from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self, user_ids: Iterable[str] = ()):
        self._users: dict[str, User] = {}
        for user_id in user_ids:
            self.add(user_id)

    def add(self, user_id: str, name: Optional[str] = None) -> User:
        user = User(id=UserId(user_id), created_at=datetime.now(timezone.utc), name=name)
        self._users[user_id] = user
        return user

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id.value)


class InMemoryLoanRepository(LoanRepository):
    def __init__(self):
        self._loans: dict[str, Loan] = {}
        self.reads = 0

    def add(self, loan: Loan) -> Loan:
        self._loans[loan.id.value] = replace(loan)
        return loan

    def _ordered(self) -> list[Loan]:
        return sorted(self._loans.values(), key=lambda loan: (loan.created_at, loan.id.value))

    @staticmethod
    def _window(items: list, offset: int, limit: int) -> list:
        return items[offset:offset + limit]

    async def get(self, loan_id: LoanId) -> Optional[Loan]:
        self.reads += 1
        loan = self._loans.get(loan_id.value)
        return replace(loan) if loan else None

    async def get_page(self, offset: int, limit: int) -> list[Loan]:
        self.reads += 1
        return [replace(loan) for loan in self._window(self._ordered(), offset, limit)]

    async def get_by_borrower(self, user_id: UserId, offset: int, limit: int) -> list[Loan]:
        self.reads += 1
        loans = [loan for loan in self._ordered() if loan.borrower_id == user_id]
        return [replace(loan) for loan in self._window(loans, offset, limit)]

    async def get_by_lender(self, user_id: UserId, offset: int, limit: int) -> list[Loan]:
        self.reads += 1
        loans = [loan for loan in self._ordered() if loan.lender_id == user_id]
        return [replace(loan) for loan in self._window(loans, offset, limit)]

    async def get_borrower_ids(self, offset: int, limit: int) -> list[str]:
        self.reads += 1
        ids = sorted({loan.borrower_id.value for loan in self._loans.values()})
        return self._window(ids, offset, limit)

    async def get_lender_ids(self, offset: int, limit: int) -> list[str]:
        self.reads += 1
        ids = sorted({loan.lender_id.value for loan in self._loans.values()})
        return self._window(ids, offset, limit)

    async def create(self, loan: Loan) -> None:
        if loan.id.value in self._loans:
            raise EntityAlreadyExistsError(f"Loan {loan.id.value} already exists.")
        self._loans[loan.id.value] = replace(loan)

    async def update(self, loan: Loan) -> None:
        if loan.id.value not in self._loans:
            raise EntityNotFoundError(f"Loan {loan.id.value} not found.")
        if self._loans[loan.id.value].is_repaid:
            raise DomainValidationError(f"Loan {loan.id.value} is already repaid.")
        self._loans[loan.id.value] = replace(loan)

    def __len__(self) -> int:
        return len(self._loans)


_BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_loan(lender: str, borrower: str, amount: str = "100.00", minutes: int = 0) -> Loan:
    """Active loan created `minutes` after a fixed base time."""
    return Loan(
        id=LoanId.generate(),
        borrower_id=UserId(borrower),
        lender_id=UserId(lender),
        amount=Decimal(amount),
        created_at=_BASE_TIME + timedelta(minutes=minutes),
    )
