"""UnitOfWork whose registries all share one ChangeSet."""

from chatnet.domain.ports import UnitOfWork
from chatnet.domain.value_objects import (
    ChatId,
    ChatNetworkId,
    MemberId,
    MessageId,
    UserId,
)
from chatnet.infrastructure.persistence.staged_registry import (
    ChangeSet,
    IdLister,
    Loader,
    StagedRegistry,
)


class StagedUnitOfWork(UnitOfWork):
    def __init__(self, load: Loader, list_ids: IdLister):
        super().__init__()
        self.changes = ChangeSet()
        self.users = StagedRegistry(UserId, self.changes, load, list_ids)
        self.members = StagedRegistry(MemberId, self.changes, load, list_ids)
        self.messages = StagedRegistry(MessageId, self.changes, load, list_ids)
        self.chats = StagedRegistry(ChatId, self.changes, load, list_ids)
        self.chat_networks = StagedRegistry(ChatNetworkId, self.changes, load, list_ids)
