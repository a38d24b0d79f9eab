"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from loans_manager.domain.exceptions.entity_not_found import EntityNotFoundError
from loans_manager.domain.exceptions.entity_already_exists import (
    EntityAlreadyExistsError,
)
from loans_manager.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "EntityAlreadyExistsError",
    "DomainValidationError",
]
