"""
Prisma Loan Repository Implementation.

- Implements LoanRepository port from domain layer
- Maps between Prisma models and domain entities
- All methods are async

Mapping:
- Prisma model fields: id, borrower_id, lender_id, amount, created_at,
  is_repaid, repaid_at
- Domain entity: Loan with value objects (LoanId, UserId)
"""

from typing import Optional

from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import Loan as PrismaLoan

from loans_manager.domain.entities.loan import Loan
from loans_manager.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from loans_manager.domain.ports.repositories import LoanRepository
from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId


# Stable order for paging: created_at alone ties on bulk inserts
_PAGE_ORDER = [{"created_at": "asc"}, {"id": "asc"}]


class PrismaLoanRepository(LoanRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaLoan) -> Loan:
        """Map Prisma record to domain entity."""
        return Loan(
            id=LoanId(record.id),
            borrower_id=UserId(record.borrower_id),
            lender_id=UserId(record.lender_id),
            amount=record.amount,
            created_at=record.created_at,
            is_repaid=record.is_repaid,
            repaid_at=record.repaid_at,
        )

    async def get(self, loan_id: LoanId) -> Optional[Loan]:
        record = await self._prisma.loan.find_unique(where={"id": loan_id.value})
        return self._to_entity(record) if record else None

    async def get_page(self, offset: int, limit: int) -> list[Loan]:
        records = await self._prisma.loan.find_many(
            skip=offset, take=limit, order=_PAGE_ORDER
        )
        return [self._to_entity(record) for record in records]

    async def get_by_borrower(
        self, user_id: UserId, offset: int, limit: int
    ) -> list[Loan]:
        records = await self._prisma.loan.find_many(
            where={"borrower_id": user_id.value},
            skip=offset,
            take=limit,
            order=_PAGE_ORDER,
        )
        return [self._to_entity(record) for record in records]

    async def get_by_lender(
        self, user_id: UserId, offset: int, limit: int
    ) -> list[Loan]:
        records = await self._prisma.loan.find_many(
            where={"lender_id": user_id.value},
            skip=offset,
            take=limit,
            order=_PAGE_ORDER,
        )
        return [self._to_entity(record) for record in records]

    async def get_borrower_ids(self, offset: int, limit: int) -> list[str]:
        records = await self._prisma.loan.find_many(
            distinct=["borrower_id"],
            order={"borrower_id": "asc"},
            skip=offset,
            take=limit,
        )
        return [record.borrower_id for record in records]

    async def get_lender_ids(self, offset: int, limit: int) -> list[str]:
        records = await self._prisma.loan.find_many(
            distinct=["lender_id"],
            order={"lender_id": "asc"},
            skip=offset,
            take=limit,
        )
        return [record.lender_id for record in records]

    async def create(self, loan: Loan) -> None:
        try:
            await self._prisma.loan.create(
                data={
                    "id": loan.id.value,
                    "borrower_id": loan.borrower_id.value,
                    "lender_id": loan.lender_id.value,
                    "amount": loan.amount,
                    "created_at": loan.created_at,
                    "is_repaid": loan.is_repaid,
                    "repaid_at": loan.repaid_at,
                }
            )
        except UniqueViolationError as e:
            raise EntityAlreadyExistsError(
                f"Loan {loan.id.value} already exists."
            ) from e

    async def update(self, loan: Loan) -> None:
        # Only an active row is written, so a repaid loan keeps its repaid_at
        updated = await self._prisma.loan.update_many(
            where={"id": loan.id.value, "is_repaid": False},
            data={
                "amount": loan.amount,
                "is_repaid": loan.is_repaid,
                "repaid_at": loan.repaid_at,
            },
        )
        if updated:
            return

        if await self._prisma.loan.find_unique(where={"id": loan.id.value}) is None:
            raise EntityNotFoundError(f"Loan {loan.id.value} not found.")
        raise DomainValidationError(f"Loan {loan.id.value} is already repaid.")
