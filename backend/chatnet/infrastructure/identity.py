"""
Caller identity held in a context variable.

The host sets the authenticated user around each submitted transaction:

    with identity.acting_as(UserId("solivan@email.com")):
        await processor.submit(record)
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from chatnet.domain.exceptions import AccessDeniedError
from chatnet.domain.ports import IdentityProvider
from chatnet.domain.value_objects import UserId

current_user_var: ContextVar[Optional[UserId]] = ContextVar("current_user", default=None)


class ContextIdentityProvider(IdentityProvider):
    def current_user(self) -> UserId:
        user = current_user_var.get()
        if user is None:
            raise AccessDeniedError("No authenticated participant for this transaction")
        return user

    @contextmanager
    def acting_as(self, user: UserId) -> Iterator[UserId]:
        token = current_user_var.set(user)
        try:
            yield user
        finally:
            current_user_var.reset(token)
