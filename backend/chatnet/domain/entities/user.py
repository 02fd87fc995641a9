"""
User Entity - A chat network participant.
"""

from dataclasses import dataclass

from chatnet.domain.value_objects.user_id import UserId


@dataclass
class User:
    id: UserId
    first_name: str
    last_name: str
