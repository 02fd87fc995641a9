"""
DOMAIN EXCEPTIONS - Business rule violations

Raised by handlers and registries, propagated unchanged to the caller of
the transaction processor. Any of them aborts the ledger transaction.
"""

from chatnet.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    MembershipNotFoundError,
)
from chatnet.domain.exceptions.entity_already_exists import EntityAlreadyExistsError
from chatnet.domain.exceptions.invalid_state import InvalidStateError
from chatnet.domain.exceptions.access_denied import AccessDeniedError
from chatnet.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "MembershipNotFoundError",
    "EntityAlreadyExistsError",
    "InvalidStateError",
    "AccessDeniedError",
    "DomainValidationError",
]
