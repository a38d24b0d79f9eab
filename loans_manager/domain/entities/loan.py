"""
Loan Entity - Money lent by one user to another.

States: Active (is_repaid=False) -> Repaid (is_repaid=True). Repaid is terminal.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from loans_manager.domain.exceptions import DomainValidationError
from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId


@dataclass
class Loan:
    # Required fields (no defaults) - must come first
    id: LoanId
    borrower_id: UserId
    lender_id: UserId
    amount: Decimal
    created_at: datetime
    # Optional fields (with defaults) - must come last
    is_repaid: bool = False
    repaid_at: Optional[datetime] = field(default=None)

    def __post_init__(self):
        if self.borrower_id == self.lender_id:
            raise ValueError("Borrower and lender must differ.")
        if self.is_repaid != (self.repaid_at is not None):
            raise ValueError("repaid_at must be set if and only if the loan is repaid.")

    @classmethod
    def create(
        cls,
        loan_id: LoanId,
        borrower_id: UserId,
        lender_id: UserId,
        amount: Decimal,
    ) -> "Loan":
        return cls(
            id=loan_id,
            borrower_id=borrower_id,
            lender_id=lender_id,
            amount=amount,
            created_at=datetime.now(timezone.utc),
        )

    def repay(self) -> None:
        if self.is_repaid:
            raise DomainValidationError(f"Loan {self.id.value} is already repaid.")

        self.is_repaid = True
        self.repaid_at = datetime.now(timezone.utc)
