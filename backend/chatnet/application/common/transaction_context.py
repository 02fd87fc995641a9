"""
Shared lookups used by every transaction handler.
"""

from chatnet.domain.entities import Chat, Member
from chatnet.domain.exceptions import AccessDeniedError
from chatnet.domain.ports import IdentityProvider, UnitOfWork
from chatnet.domain.services.identifiers import IdFactory, generate_uuid
from chatnet.domain.value_objects import UserId


class TransactionContext:
    """Bundle of collaborators a handler needs inside one ledger transaction."""

    def __init__(
        self,
        uow: UnitOfWork,
        identity: IdentityProvider,
        id_factory: IdFactory = generate_uuid,
    ):
        self.uow = uow
        self.identity = identity
        self.id_factory = id_factory

    async def caller(self) -> UserId:
        """Authenticated caller, which must be a registered user."""
        user_id = self.identity.current_user()
        if not await self.uow.users.exists(user_id):
            raise AccessDeniedError(f"Caller {user_id} is not a registered user")
        return user_id

    async def members_of(self, chat: Chat) -> list[Member]:
        """Dereference the chat's member list, in join order."""
        return [await self.uow.members.get(member_id) for member_id in chat.member_list]
