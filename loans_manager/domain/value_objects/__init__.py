from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId

__all__ = [
    "LoanId",
    "UserId",
]
