"""
Entity codec - entities to JSON-ready dicts and back.

Used by ledgers that keep records out of process. References are stored
as bare ids; the entity type is implied by the key the record lives
under.
"""

from datetime import datetime
from typing import Any, Callable

from chatnet.domain.entities import Chat, ChatNetwork, Member, Message, User
from chatnet.domain.value_objects import (
    ChatId,
    ChatNetworkId,
    ChatType,
    MemberId,
    MemberStatus,
    MemberType,
    MessageId,
    UserId,
)


def _user_to_dict(user: User) -> dict[str, Any]:
    return {
        "id": user.id.value,
        "first_name": user.first_name,
        "last_name": user.last_name,
    }


def _user_from_dict(d: dict[str, Any]) -> User:
    return User(id=UserId(d["id"]), first_name=d["first_name"], last_name=d["last_name"])


def _member_to_dict(member: Member) -> dict[str, Any]:
    return {
        "id": member.id.value,
        "type": member.type.value,
        "status": member.status.value,
        "added_at": member.added_at.isoformat(),
        "user": member.user.value,
    }


def _member_from_dict(d: dict[str, Any]) -> Member:
    return Member(
        id=MemberId(d["id"]),
        type=MemberType(d["type"]),
        status=MemberStatus(d["status"]),
        added_at=datetime.fromisoformat(d["added_at"]),
        user=UserId(d["user"]),
    )


def _message_to_dict(message: Message) -> dict[str, Any]:
    return {
        "id": message.id.value,
        "content": message.content,
        "create_at": message.create_at.isoformat(),
        "owner": message.owner.value,
    }


def _message_from_dict(d: dict[str, Any]) -> Message:
    return Message(
        id=MessageId(d["id"]),
        content=d["content"],
        create_at=datetime.fromisoformat(d["create_at"]),
        owner=UserId(d["owner"]),
    )


def _chat_to_dict(chat: Chat) -> dict[str, Any]:
    return {
        "id": chat.id.value,
        "title": chat.title,
        "create_at": chat.create_at.isoformat(),
        "type": chat.type.value,
        "member_list": [m.value for m in chat.member_list],
        "message_list": [m.value for m in chat.message_list],
    }


def _chat_from_dict(d: dict[str, Any]) -> Chat:
    return Chat(
        id=ChatId(d["id"]),
        title=d["title"],
        create_at=datetime.fromisoformat(d["create_at"]),
        type=ChatType(d["type"]),
        member_list=[MemberId(m) for m in d.get("member_list", [])],
        message_list=[MessageId(m) for m in d.get("message_list", [])],
    )


def _network_to_dict(network: ChatNetwork) -> dict[str, Any]:
    return {
        "id": network.id.value,
        "name": network.name,
        "chat_list": [c.value for c in network.chat_list],
    }


def _network_from_dict(d: dict[str, Any]) -> ChatNetwork:
    return ChatNetwork(
        id=ChatNetworkId(d["id"]),
        name=d["name"],
        chat_list=[ChatId(c) for c in d.get("chat_list", [])],
    )


_ENCODERS: dict[type, Callable[[Any], dict[str, Any]]] = {
    User: _user_to_dict,
    Member: _member_to_dict,
    Message: _message_to_dict,
    Chat: _chat_to_dict,
    ChatNetwork: _network_to_dict,
}

_DECODERS: dict[str, Callable[[dict[str, Any]], Any]] = {
    UserId.entity_type: _user_from_dict,
    MemberId.entity_type: _member_from_dict,
    MessageId.entity_type: _message_from_dict,
    ChatId.entity_type: _chat_from_dict,
    ChatNetworkId.entity_type: _network_from_dict,
}


def to_dict(entity: Any) -> dict[str, Any]:
    try:
        return _ENCODERS[type(entity)](entity)
    except KeyError:
        raise TypeError(f"Cannot encode {type(entity).__name__}") from None


def from_dict(entity_type: str, data: dict[str, Any]) -> Any:
    try:
        decoder = _DECODERS[entity_type]
    except KeyError:
        raise TypeError(f"Unknown entity type: {entity_type}") from None
    return decoder(data)
