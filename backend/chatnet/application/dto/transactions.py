"""
Transaction records - the closed set of operations a caller may submit.

A raw record is a mapping naming its operation in ``type`` or in the
platform's ``$class`` field (bare or namespaced, e.g.
``org.miluxas.chatnet2.JoinToChat``). Each operation has its own model
carrying exactly its fields; unknown fields are rejected. Field names
follow the ledger model (camelCase) and snake_case is accepted as well.

Relationship fields hold a bare id or a ``resource:`` URI.

    command = parse_transaction({"$class": "JoinToChat", "chat": "32556"})
"""

from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from chatnet.application.commands.chats import (
    StartNewGroupChatCommand,
    StartNewPeerChatCommand,
)
from chatnet.application.commands.membership import (
    AddOtherUserToChatCommand,
    BlockMemberCommand,
    ExpelMemberFromChatCommand,
    JoinToChatCommand,
    LeaveChatCommand,
)
from chatnet.application.commands.messages import (
    DeleteMessageCommand,
    SendMessageToChatCommand,
)
from chatnet.application.common.interfaces import Command
from chatnet.domain.exceptions import DomainValidationError
from chatnet.domain.value_objects import (
    ChatId,
    ChatNetworkId,
    ChatType,
    MemberId,
    MessageId,
    UserId,
)

# Envelope fields stamped by the ledger platform, not part of any operation.
ENVELOPE_FIELDS = ("transactionId", "timestamp")


class TransactionRecord(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )


class SendMessageToChatRecord(TransactionRecord):
    type: Literal["SendMessageToChat"]
    chat: str
    message: Optional[str] = None
    content: Optional[str] = None

    @model_validator(mode="after")
    def _message_or_content(self):
        if self.message is None and self.content is None:
            raise ValueError("SendMessageToChat needs a message reference or content")
        return self

    def to_command(self) -> SendMessageToChatCommand:
        return SendMessageToChatCommand(
            chat=ChatId.parse(self.chat),
            content=self.content,
            message_id=MessageId.parse(self.message) if self.message else None,
        )


class StartNewPeerChatRecord(TransactionRecord):
    type: Literal["StartNewPeerChat"]
    new_chat_id: str = Field(alias="newChatId", min_length=1)
    new_chat_title: str = Field(alias="newChatTitle")
    peer_user: str = Field(alias="peerUser")
    chat_net_id: Optional[str] = Field(default=None, alias="chatNetId")

    def to_command(self) -> StartNewPeerChatCommand:
        return StartNewPeerChatCommand(
            new_chat_id=ChatId(self.new_chat_id),
            new_chat_title=self.new_chat_title,
            peer_user=UserId.parse(self.peer_user),
            chat_net=ChatNetworkId.parse(self.chat_net_id) if self.chat_net_id else None,
        )


class StartNewGroupChatRecord(TransactionRecord):
    type: Literal["StartNewGroupChat"]
    new_chat_id: str = Field(alias="newChatId", min_length=1)
    new_chat_title: str = Field(alias="newChatTitle")
    chat_type: ChatType = Field(alias="chatType")
    chat_net_id: Optional[str] = Field(default=None, alias="chatNetId")

    def to_command(self) -> StartNewGroupChatCommand:
        return StartNewGroupChatCommand(
            new_chat_id=ChatId(self.new_chat_id),
            new_chat_title=self.new_chat_title,
            type=self.chat_type,
            chat_net=ChatNetworkId.parse(self.chat_net_id) if self.chat_net_id else None,
        )


class JoinToChatRecord(TransactionRecord):
    type: Literal["JoinToChat"]
    chat: str

    def to_command(self) -> JoinToChatCommand:
        return JoinToChatCommand(chat=ChatId.parse(self.chat))


class AddOtherUserToChatRecord(TransactionRecord):
    type: Literal["AddOtherUserToChat"]
    chat: str
    other_user: str = Field(alias="otherUser")

    def to_command(self) -> AddOtherUserToChatCommand:
        return AddOtherUserToChatCommand(
            chat=ChatId.parse(self.chat), other_user=UserId.parse(self.other_user)
        )


class ExpelMemberFromChatRecord(TransactionRecord):
    type: Literal["ExpelMemberFromChat"]
    chat: str
    member: str

    def to_command(self) -> ExpelMemberFromChatCommand:
        return ExpelMemberFromChatCommand(
            chat=ChatId.parse(self.chat), member=MemberId.parse(self.member)
        )


class BlockMemberRecord(TransactionRecord):
    type: Literal["BlockMember"]
    chat: str
    member: str

    def to_command(self) -> BlockMemberCommand:
        return BlockMemberCommand(
            chat=ChatId.parse(self.chat), member=MemberId.parse(self.member)
        )


class LeaveChatRecord(TransactionRecord):
    type: Literal["LeaveChat"]
    chat: str

    def to_command(self) -> LeaveChatCommand:
        return LeaveChatCommand(chat=ChatId.parse(self.chat))


class DeleteMessageRecord(TransactionRecord):
    type: Literal["DeleteMessage"]
    chat: str
    message: str

    def to_command(self) -> DeleteMessageCommand:
        return DeleteMessageCommand(
            chat=ChatId.parse(self.chat), message=MessageId.parse(self.message)
        )


AnyTransactionRecord = Annotated[
    Union[
        SendMessageToChatRecord,
        StartNewPeerChatRecord,
        StartNewGroupChatRecord,
        JoinToChatRecord,
        AddOtherUserToChatRecord,
        ExpelMemberFromChatRecord,
        BlockMemberRecord,
        LeaveChatRecord,
        DeleteMessageRecord,
    ],
    Field(discriminator="type"),
]

_record_adapter: TypeAdapter[AnyTransactionRecord] = TypeAdapter(AnyTransactionRecord)

TRANSACTION_TYPES = (
    "SendMessageToChat",
    "StartNewPeerChat",
    "StartNewGroupChat",
    "JoinToChat",
    "AddOtherUserToChat",
    "ExpelMemberFromChat",
    "BlockMember",
    "LeaveChat",
    "DeleteMessage",
)


def _normalize(raw: Mapping[str, Any]) -> dict[str, Any]:
    data = dict(raw)
    for key in ENVELOPE_FIELDS:
        data.pop(key, None)

    class_name = data.pop("$class", None)
    if class_name is None:
        type_name = data.get("type")
        if not type_name:
            raise DomainValidationError("Transaction record has no type")
        data["type"] = str(type_name).rsplit(".", 1)[-1]
        return data

    type_name = str(class_name).rsplit(".", 1)[-1]
    if "type" in data and data["type"] != type_name:
        if type_name != "StartNewGroupChat":
            raise DomainValidationError(
                f"Transaction type {data['type']} does not match $class {class_name}"
            )
        # the ledger model keeps the group chat type in "type"
        data.setdefault("chatType", data["type"])
    data["type"] = type_name
    return data


def parse_transaction(raw: Mapping[str, Any]) -> Command[Any]:
    """
    Validate a raw transaction record and build its command.

    Raises:
        DomainValidationError: If the record is unknown or malformed
    """
    data = _normalize(raw)
    if data["type"] not in TRANSACTION_TYPES:
        raise DomainValidationError(f"Unknown transaction type: {data['type']}")
    try:
        record = _record_adapter.validate_python(data)
        return record.to_command()
    except ValueError as e:  # pydantic.ValidationError is a ValueError
        raise DomainValidationError(f"Invalid {data['type']} transaction: {e}") from e
