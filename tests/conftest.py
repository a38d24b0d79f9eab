import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from loans_manager.application.commands import build_command_bus
from loans_manager.application.services.loans_service import LoansService
from loans_manager.config.settings import ApiSettings
from loans_manager.domain.ports.repositories import LoanRepository, UserRepository
from loans_manager.fastapi_app import create_fastapi_app
from loans_manager.setup.ioc.application_provider import ApplicationProvider

from tests.fakes import InMemoryLoanRepository, InMemoryUserRepository

USERS = ("alice", "bob", "carol")
MAX_TAKE = 20


class InMemoryPersistenceProvider(Provider):
    """Hands the same in-memory repositories to every request."""

    def __init__(self, loans: LoanRepository, users: UserRepository):
        super().__init__()
        self._loans = loans
        self._users = users

    @provide(scope=Scope.APP)
    def get_loan_repository(self) -> LoanRepository:
        return self._loans

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._users


@pytest.fixture()
def user_repository():
    return InMemoryUserRepository(USERS)


@pytest.fixture()
def loan_repository():
    return InMemoryLoanRepository()


@pytest.fixture()
def command_bus(loan_repository, user_repository):
    return build_command_bus(loan_repository, user_repository)


@pytest.fixture()
def loans_service(loan_repository):
    return LoansService(loan_repository)


@pytest.fixture()
def api_settings():
    return ApiSettings(max_number_of_record_to_get=MAX_TAKE)


@pytest.fixture()
def app_with_settings(loan_repository, user_repository):
    """Builds FastAPI apps wired to the in-memory repositories."""

    def build(settings: ApiSettings):
        container = make_async_container(
            InMemoryPersistenceProvider(loan_repository, user_repository),
            ApplicationProvider(settings),
        )
        return create_fastapi_app(container)

    return build


@pytest.fixture()
def app(app_with_settings, api_settings):
    return app_with_settings(api_settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
