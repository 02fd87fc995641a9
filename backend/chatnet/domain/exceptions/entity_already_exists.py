"""
EntityAlreadyExistsError - Raised when adding an entity whose key is taken.
"""


class EntityAlreadyExistsError(Exception):
    """Exception raised when an entity with the same identifier exists."""

    def __init__(self, message: str = "An entity with this identifier already exists."):
        super().__init__(message)
