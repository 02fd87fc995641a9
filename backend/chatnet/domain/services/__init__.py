"""
DOMAIN SERVICES - Pure rules with no I/O.
"""

from chatnet.domain.services.identifiers import generate_uuid
from chatnet.domain.services.sequences import remove_element
from chatnet.domain.services import membership_policy

__all__ = [
    "generate_uuid",
    "remove_element",
    "membership_policy",
]
