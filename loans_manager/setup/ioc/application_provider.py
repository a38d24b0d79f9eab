"""
Application-layer dependencies.

Depends only on the repository ports, so any provider that supplies
LoanRepository and UserRepository (Prisma in production, in-memory in tests)
completes the graph.

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
"""

from dishka import Provider, Scope, provide

from loans_manager.application.commands import build_command_bus
from loans_manager.application.common.command_bus import CommandBus
from loans_manager.application.services.loans_service import LoansService
from loans_manager.config.settings import ApiSettings
from loans_manager.domain.ports.repositories import LoanRepository, UserRepository


class ApplicationProvider(Provider):
    """Settings, the command bus and the read-side service."""

    def __init__(self, settings: ApiSettings | None = None):
        super().__init__()
        self._settings = settings or ApiSettings.from_config()

    # ==================== SETTINGS ====================

    @provide(scope=Scope.APP)
    def get_api_settings(self) -> ApiSettings:
        return self._settings

    # ==================== COMMANDS ====================

    @provide(scope=Scope.REQUEST)
    def get_command_bus(
        self,
        loan_repository: LoanRepository,
        user_repository: UserRepository,
    ) -> CommandBus:
        """
        Provide CommandBus.

        - One bus per request, built over that request's repositories
        - Routing table comes from build_command_bus(), not from the container
        """
        return build_command_bus(loan_repository, user_repository)

    # ==================== QUERIES ====================

    @provide(scope=Scope.REQUEST)
    def get_loans_service(self, loan_repository: LoanRepository) -> LoansService:
        return LoansService(loan_repository)
