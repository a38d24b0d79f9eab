"""
User Entity - A borrower or lender.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from loans_manager.domain.value_objects.user_id import UserId


@dataclass
class User:
    id: UserId
    created_at: datetime
    name: Optional[str] = None
