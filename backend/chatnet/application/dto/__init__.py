"""Boundary models for transaction records and chat views."""

from chatnet.application.dto.transactions import (
    TRANSACTION_TYPES,
    TransactionRecord,
    parse_transaction,
)
from chatnet.application.dto.chat import ChatDTO, MemberDTO, MessageDTO

__all__ = [
    "TRANSACTION_TYPES",
    "TransactionRecord",
    "parse_transaction",
    "ChatDTO",
    "MemberDTO",
    "MessageDTO",
]
