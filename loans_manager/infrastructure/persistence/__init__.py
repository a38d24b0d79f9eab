"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from loans_manager.infrastructure.persistence.prisma_loan_repository import (
    PrismaLoanRepository,
)
from loans_manager.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)

__all__ = [
    "PrismaLoanRepository",
    "PrismaUserRepository",
]
