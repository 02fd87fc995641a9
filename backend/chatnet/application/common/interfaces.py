"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class JoinToChatCommand(Command[MemberId]):
        chat: ChatId

    class JoinToChatHandler(CommandHandler[MemberId]):
        def __init__(self, context: TransactionContext):
            self._context = context

        async def execute(self, cmd: JoinToChatCommand) -> MemberId:
            chat = await self._context.uow.chats.get(cmd.chat)
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """One ledger transaction, already validated. T is what the handler returns."""


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """
        Run the command against the open transaction.

        Raising aborts the transaction; nothing staged so far is written.
        """
        ...


class Query(ABC, Generic[T]):
    """Read-only request answered from one consistent ledger view"""


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T: ...
