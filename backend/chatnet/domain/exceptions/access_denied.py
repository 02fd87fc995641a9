"""
AccessDeniedError - Raised when the caller lacks standing for an action.
"""


class AccessDeniedError(Exception):
    """Raised when the caller lacks permission to perform an action"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
