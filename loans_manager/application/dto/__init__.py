"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- loan.py → LoanDTO, ValidationResultDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from loans_manager.application.dto.loan import (
    LoanDTO,
    ValidationFailureDTO,
    ValidationResultDTO,
)

__all__ = [
    "LoanDTO",
    "ValidationFailureDTO",
    "ValidationResultDTO",
]
