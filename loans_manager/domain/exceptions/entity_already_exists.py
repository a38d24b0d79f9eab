"""
EntityAlreadyExistsError - Raised when an entity is created with an id that is taken.
Maps to: HTTP 409 Conflict
"""


class EntityAlreadyExistsError(Exception):
    """Exception raised when an entity with the same id is already stored."""

    def __init__(self, message: str = "An entity with this id already exists."):
        super().__init__(message)
