"""
API Routers - FastAPI endpoint definitions.
"""

from loans_manager.presentation.api.loans import router as loans_router

__all__ = [
    "loans_router",
]
