"""
InvalidStateError - Raised when an entity's current status forbids an operation.
"""


class InvalidStateError(Exception):
    """Exception raised for operations not allowed in the current state."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
