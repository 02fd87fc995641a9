"""
ENTITIES - Records with identity kept in the ledger

Each entity:
- Has a unique identifier (a typed reference value object)
- Holds references, never other entity objects
- Owns the state changes it allows
"""

from chatnet.domain.entities.user import User
from chatnet.domain.entities.member import Member
from chatnet.domain.entities.message import Message
from chatnet.domain.entities.chat import Chat
from chatnet.domain.entities.chat_network import ChatNetwork

__all__ = [
    "User",
    "Member",
    "Message",
    "Chat",
    "ChatNetwork",
]
