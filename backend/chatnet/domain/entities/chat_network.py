"""
ChatNetwork Entity - Singleton list of every chat in the network.
"""

from dataclasses import dataclass, field

from chatnet.domain.exceptions import EntityAlreadyExistsError
from chatnet.domain.value_objects import ChatId, ChatNetworkId


@dataclass
class ChatNetwork:
    id: ChatNetworkId
    name: str
    chat_list: list[ChatId] = field(default_factory=list)

    def register_chat(self, chat_id: ChatId) -> None:
        if chat_id in self.chat_list:
            raise EntityAlreadyExistsError(
                f"Chat {chat_id} is already registered in network {self.id}"
            )
        self.chat_list.append(chat_id)
