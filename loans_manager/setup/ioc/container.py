"""
Dishka DI Container Setup.

- PersistenceProvider maps repository ports to Prisma implementations
- ApplicationProvider builds the command bus and query service on top
- create_container() combines both; call it ONCE at app startup

Flow:
  Container → provides → PrismaLoanRepository → to → build_command_bus()
                                  ↓
                          uses LoanRepository interface
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma

from loans_manager.config.settings import ApiSettings
from loans_manager.domain.ports.repositories import LoanRepository, UserRepository
from loans_manager.infrastructure.persistence import (
    PrismaLoanRepository,
    PrismaUserRepository,
)
from loans_manager.setup.ioc.application_provider import ApplicationProvider


class PersistenceProvider(Provider):
    """Prisma client and repositories."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE when app starts, shared across all requests
        - Disconnected when the container is closed
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_loan_repository(self, prisma: Prisma) -> LoanRepository:
        """
        Provide LoanRepository implementation.

        - Return type is ABSTRACT (LoanRepository)
        - Implementation is CONCRETE (PrismaLoanRepository)
        """
        return PrismaLoanRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)


def create_container(settings: ApiSettings | None = None) -> AsyncContainer:
    return make_async_container(PersistenceProvider(), ApplicationProvider(settings))
