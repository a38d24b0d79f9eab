"""Prisma User Repository Implementation."""

from typing import Optional

from prisma import Prisma
from prisma.models import User as PrismaUser

from loans_manager.domain.entities.user import User
from loans_manager.domain.ports.repositories import UserRepository
from loans_manager.domain.value_objects.user_id import UserId


class PrismaUserRepository(UserRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        return User(
            id=UserId(record.id),
            created_at=record.created_at,
            name=record.name,
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None
