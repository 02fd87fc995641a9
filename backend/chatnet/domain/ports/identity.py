"""
Identity Port - who submitted the running transaction.
"""

from abc import ABC, abstractmethod

from chatnet.domain.value_objects import UserId


class IdentityProvider(ABC):
    @abstractmethod
    def current_user(self) -> UserId:
        """Return the authenticated caller or raise AccessDeniedError."""
        ...
