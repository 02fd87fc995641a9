"""
Transaction Processor - single entry point for ledger transactions.

Flow for one submit():
1. Validate the raw record and build its command (boundary check)
2. Open a ledger transaction (the ledger serializes transactions)
3. Run the matching handler once
4. Commit on success; on any error nothing is written
5. Publish the events staged by the handler, only after commit

Errors from handlers propagate unchanged to the caller. There are no
retries at this layer.
"""

import logging
from typing import Any, Callable, Mapping, Union

from chatnet.application.commands.chats import (
    StartNewGroupChatCommand,
    StartNewGroupChatHandler,
    StartNewPeerChatCommand,
    StartNewPeerChatHandler,
)
from chatnet.application.commands.membership import (
    AddOtherUserToChatCommand,
    AddOtherUserToChatHandler,
    BlockMemberCommand,
    BlockMemberHandler,
    ExpelMemberFromChatCommand,
    ExpelMemberFromChatHandler,
    JoinToChatCommand,
    JoinToChatHandler,
    LeaveChatCommand,
    LeaveChatHandler,
)
from chatnet.application.commands.messages import (
    DeleteMessageCommand,
    DeleteMessageHandler,
    SendMessageToChatCommand,
    SendMessageToChatHandler,
)
from chatnet.application.common.interfaces import Command, CommandHandler
from chatnet.application.common.transaction_context import TransactionContext
from chatnet.application.dto.transactions import parse_transaction
from chatnet.application.queries import (
    ChatView,
    GetChatHandler,
    GetChatQuery,
    ListNetworkChatsHandler,
    ListNetworkChatsQuery,
)
from chatnet.config.logging_config import transaction_id_var
from chatnet.domain.entities import Chat
from chatnet.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidStateError,
)
from chatnet.domain.ports import EventSink, IdentityProvider, Ledger
from chatnet.domain.services.identifiers import IdFactory, generate_uuid
from chatnet.domain.value_objects import ChatId, ChatNetworkId

logger = logging.getLogger(__name__)

DOMAIN_ERRORS = (
    EntityNotFoundError,
    EntityAlreadyExistsError,
    InvalidStateError,
    AccessDeniedError,
    DomainValidationError,
)

HandlerFactory = Callable[[TransactionContext, ChatNetworkId], CommandHandler[Any]]

HANDLERS: dict[type, HandlerFactory] = {
    SendMessageToChatCommand: lambda ctx, net: SendMessageToChatHandler(ctx),
    StartNewPeerChatCommand: lambda ctx, net: StartNewPeerChatHandler(ctx, net),
    StartNewGroupChatCommand: lambda ctx, net: StartNewGroupChatHandler(ctx, net),
    JoinToChatCommand: lambda ctx, net: JoinToChatHandler(ctx),
    AddOtherUserToChatCommand: lambda ctx, net: AddOtherUserToChatHandler(ctx),
    ExpelMemberFromChatCommand: lambda ctx, net: ExpelMemberFromChatHandler(ctx),
    BlockMemberCommand: lambda ctx, net: BlockMemberHandler(ctx),
    LeaveChatCommand: lambda ctx, net: LeaveChatHandler(ctx),
    DeleteMessageCommand: lambda ctx, net: DeleteMessageHandler(ctx),
}


class TransactionProcessor:
    def __init__(
        self,
        ledger: Ledger,
        identity: IdentityProvider,
        event_sink: EventSink,
        network_id: ChatNetworkId,
        id_factory: IdFactory = generate_uuid,
    ):
        self._ledger = ledger
        self._identity = identity
        self._event_sink = event_sink
        self._network_id = network_id
        self._id_factory = id_factory

    async def submit(self, transaction: Union[Mapping[str, Any], Command[Any]]) -> Any:
        """
        Run one transaction to completion.

        Args:
            transaction: Raw transaction record or an already built command

        Returns:
            The handler's result (new chat id, new member id, ...)

        Raises:
            DomainValidationError: If the record is malformed
            EntityNotFoundError, EntityAlreadyExistsError, InvalidStateError,
            AccessDeniedError: If the handler rejects the transaction
        """
        token = transaction_id_var.set(generate_uuid())
        try:
            command = (
                parse_transaction(transaction)
                if isinstance(transaction, Mapping)
                else transaction
            )
            factory = HANDLERS.get(type(command))
            if factory is None:
                raise DomainValidationError(
                    f"No handler for {type(command).__name__}"
                )

            name = type(command).__name__.removesuffix("Command")
            logger.debug(f"[Processor] {name} started")
            async with self._ledger.transaction() as uow:
                context = TransactionContext(uow, self._identity, self._id_factory)
                result = await factory(context, self._network_id).execute(command)
                events = uow.events
            logger.info(f"[Processor] {name} committed ({len(events)} event(s))")

            await self._publish(events)
            return result
        except DOMAIN_ERRORS as e:
            logger.warning(f"[Processor] transaction rejected: {type(e).__name__}: {e}")
            raise
        finally:
            transaction_id_var.reset(token)

    async def _publish(self, events) -> None:
        for event in events:
            try:
                await self._event_sink.publish(event)
            except Exception:
                # the transaction is already committed; delivery is best effort
                logger.exception(f"[Processor] failed to publish {event.name}")

    async def get_chat(self, chat_id: ChatId) -> ChatView:
        async with self._ledger.transaction() as uow:
            return await GetChatHandler(uow).execute(GetChatQuery(chat=chat_id))

    async def list_chats(self) -> list[Chat]:
        async with self._ledger.transaction() as uow:
            return await ListNetworkChatsHandler(uow).execute(
                ListNetworkChatsQuery(network=self._network_id)
            )
