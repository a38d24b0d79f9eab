"""
DOMAIN LAYER - Loans and the rules around them

This layer contains:
- Entities: Business objects with identity (Loan, User)
- Value Objects: Immutable types (LoanId, UserId)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
