"""
EntityNotFoundError - Raised when a referenced entity does not exist.
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class MembershipNotFoundError(EntityNotFoundError):
    """Raised when the caller has no member entry in a chat."""

    def __init__(self, chat_id: str, user_id: str):
        super().__init__(f"User {user_id} is not a member of chat {chat_id}")
        self.chat_id = chat_id
        self.user_id = user_id
