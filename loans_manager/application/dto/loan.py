"""Loan DTOs for API request/response."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel

from loans_manager.application.common.validation import ValidationResult
from loans_manager.domain.entities.loan import Loan


class LoanDTO(BaseModel):
    id: str
    borrower_id: str
    lender_id: str
    amount: Decimal
    created_at: datetime
    is_repaid: bool
    repaid_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoanDTO":
        return cls(
            id=loan.id.value,
            borrower_id=loan.borrower_id.value,
            lender_id=loan.lender_id.value,
            amount=loan.amount,
            created_at=loan.created_at,
            is_repaid=loan.is_repaid,
            repaid_at=loan.repaid_at,
        )


class ValidationFailureDTO(BaseModel):
    field: str
    attempted_value: Any = None
    code: str
    message: str


class ValidationResultDTO(BaseModel):
    """
    Body of every 400 produced by a failed validation.

    {
        "is_valid": false,
        "errors": [
            {"field": "lender_id", "attempted_value": "", "code": "...", "message": "..."}
        ]
    }
    """

    is_valid: bool
    errors: list[ValidationFailureDTO]

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResultDTO":
        return cls(
            is_valid=result.is_valid,
            errors=[
                ValidationFailureDTO(
                    field=error.field,
                    attempted_value=error.attempted_value,
                    code=error.code,
                    message=error.message,
                )
                for error in result.errors
            ],
        )
