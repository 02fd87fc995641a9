"""
Member Entity - One user's relationship to one chat.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from chatnet.domain.services.identifiers import IdFactory, generate_uuid
from chatnet.domain.services.membership_policy import check_transition
from chatnet.domain.value_objects import MemberId, MemberStatus, MemberType, UserId


@dataclass
class Member:
    id: MemberId
    type: MemberType
    status: MemberStatus
    added_at: datetime
    user: UserId

    @classmethod
    def create(
        cls,
        user: UserId,
        member_type: MemberType,
        status: MemberStatus,
        id_factory: IdFactory = generate_uuid,
    ) -> Member:
        """Factory method to create a new Member with a generated ID and timestamp."""
        return cls(
            id=MemberId(id_factory()),
            type=member_type,
            status=status,
            added_at=datetime.now(timezone.utc),
            user=user,
        )

    def change_status(self, target: MemberStatus) -> bool:
        """Apply a status transition; returns False if nothing changed."""
        if not check_transition(self.status, target):
            return False
        self.status = target
        return True

    def expel(self) -> bool:
        return self.change_status(MemberStatus.EXPELLED)

    def block(self) -> bool:
        return self.change_status(MemberStatus.BLOCKED)

    def leave(self) -> bool:
        return self.change_status(MemberStatus.LEFT)
