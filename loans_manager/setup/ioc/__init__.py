"""Dishka wiring. Import create_container from .container (needs a generated Prisma client)."""

from loans_manager.setup.ioc.application_provider import ApplicationProvider

__all__ = ["ApplicationProvider"]
