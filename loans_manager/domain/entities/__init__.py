from loans_manager.domain.entities.loan import Loan
from loans_manager.domain.entities.user import User

__all__ = [
    "Loan",
    "User",
]
