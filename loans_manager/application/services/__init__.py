from loans_manager.application.services.loans_service import LoansService

__all__ = ["LoansService"]
