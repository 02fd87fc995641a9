"""Membership commands."""

from .join_to_chat import JoinToChatCommand, JoinToChatHandler
from .add_other_user_to_chat import AddOtherUserToChatCommand, AddOtherUserToChatHandler
from .expel_member import ExpelMemberFromChatCommand, ExpelMemberFromChatHandler
from .block_member import BlockMemberCommand, BlockMemberHandler
from .leave_chat import LeaveChatCommand, LeaveChatHandler

__all__ = [
    "JoinToChatCommand",
    "JoinToChatHandler",
    "AddOtherUserToChatCommand",
    "AddOtherUserToChatHandler",
    "ExpelMemberFromChatCommand",
    "ExpelMemberFromChatHandler",
    "BlockMemberCommand",
    "BlockMemberHandler",
    "LeaveChatCommand",
    "LeaveChatHandler",
]
