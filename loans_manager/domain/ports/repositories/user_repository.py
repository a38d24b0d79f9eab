"""
User Repository Port - Interface for user lookups.
Implementation: loans_manager/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from loans_manager.domain.entities.user import User
from loans_manager.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...
