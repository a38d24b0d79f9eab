"""
LoanId Value Object - UUID wrapper for loan identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class LoanId:
    value: str  # loan_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("LoanId cannot be empty")

        try:
            UUID(self.value)
        except ValueError as e:
            raise ValueError(f"Invalid loan ID (UUID): {self.value}") from e

    @classmethod
    def generate(cls) -> "LoanId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
