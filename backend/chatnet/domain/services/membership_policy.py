"""
Membership policy - how chat type and member status govern membership.

Initial status:
- self-service join: public chats admit immediately (NORMAL), private
  chats queue a request (REQUESTED), peer chats cannot be joined
- administrative add: always NORMAL, the inviter's standing replaces the
  join rule

Status transitions (re-applying the current status is a no-op):
    NORMAL    -> EXPELLED | BLOCKED | LEFT
    REQUESTED -> EXPELLED | BLOCKED | LEFT
EXPELLED, BLOCKED and LEFT are terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from chatnet.domain.exceptions import AccessDeniedError, InvalidStateError
from chatnet.domain.value_objects import ChatType, MemberStatus, MemberType, UserId

if TYPE_CHECKING:
    from chatnet.domain.entities.chat import Chat
    from chatnet.domain.entities.member import Member

ALLOWED_TRANSITIONS: dict[MemberStatus, frozenset[MemberStatus]] = {
    MemberStatus.NORMAL: frozenset(
        {MemberStatus.EXPELLED, MemberStatus.BLOCKED, MemberStatus.LEFT}
    ),
    MemberStatus.REQUESTED: frozenset(
        {MemberStatus.EXPELLED, MemberStatus.BLOCKED, MemberStatus.LEFT}
    ),
    MemberStatus.EXPELLED: frozenset(),
    MemberStatus.BLOCKED: frozenset(),
    MemberStatus.LEFT: frozenset(),
}


def initial_join_status(chat: Chat) -> MemberStatus:
    """Status of a member created by the user joining on their own."""
    if chat.type.is_public:
        return MemberStatus.NORMAL
    if chat.type.is_private:
        return MemberStatus.REQUESTED
    raise InvalidStateError(f"Chat {chat.id} is a peer chat and cannot be joined")


def initial_added_status(chat: Chat) -> MemberStatus:
    """Status of a member added by another participant."""
    if chat.type is ChatType.PEER:
        raise InvalidStateError(f"Peer chat {chat.id} has a fixed member list")
    return MemberStatus.NORMAL


def check_transition(current: MemberStatus, target: MemberStatus) -> bool:
    """
    Validate a status change.

    Returns:
        False when the member already has ``target`` (nothing to write),
        True when the change should be applied.

    Raises:
        InvalidStateError: If the state machine forbids the change
    """
    if current is target:
        return False
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidStateError(
            f"Member status cannot change from {current.value} to {target.value}"
        )
    return True


def ensure_can_enter(chat: Chat, user_id: UserId, members: Iterable[Member]) -> None:
    """Reject a join/add for a user who is active or blocked in the chat."""
    for member in members:
        if member.user != user_id:
            continue
        if member.status is MemberStatus.BLOCKED:
            raise AccessDeniedError(f"User {user_id} is blocked in chat {chat.id}")
        if member.status.is_active:
            raise InvalidStateError(
                f"User {user_id} already has membership {member.id} in chat {chat.id}"
            )


def find_owner(user_id: UserId, members: Iterable[Member]) -> Optional[Member]:
    for member in members:
        if (
            member.user == user_id
            and member.type is MemberType.OWNER
            and member.status is MemberStatus.NORMAL
        ):
            return member
    return None


def ensure_can_administer(chat: Chat, caller: UserId, members: Iterable[Member]) -> Member:
    """Only an active owner may add, expel or block members."""
    owner = find_owner(caller, members)
    if owner is None:
        raise AccessDeniedError(f"User {caller} is not an owner of chat {chat.id}")
    return owner


def ensure_can_sanction(target: Member) -> None:
    if target.type is MemberType.OWNER:
        raise AccessDeniedError(f"Owner member {target.id} cannot be expelled or blocked")
