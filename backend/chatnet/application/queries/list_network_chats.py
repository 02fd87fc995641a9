"""ListNetworkChats Query - chats of the network in creation order."""

from dataclasses import dataclass

from chatnet.application.common.interfaces import Query, QueryHandler
from chatnet.domain.entities import Chat
from chatnet.domain.ports import UnitOfWork
from chatnet.domain.value_objects import ChatNetworkId


@dataclass(frozen=True)
class ListNetworkChatsQuery(Query[list[Chat]]):
    network: ChatNetworkId


class ListNetworkChatsHandler(QueryHandler[list[Chat]]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, query: ListNetworkChatsQuery) -> list[Chat]:
        network = await self._uow.chat_networks.get(query.network)
        return [await self._uow.chats.get(chat_id) for chat_id in network.chat_list]
