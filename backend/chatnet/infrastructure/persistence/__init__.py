"""
Persistence Layer - Ledger implementations.

Both ledgers stage writes in a ChangeSet during the transaction and apply
them together on commit.
"""

from chatnet.infrastructure.persistence.in_memory_ledger import InMemoryLedger
from chatnet.infrastructure.persistence.redis_ledger import RedisLedger

__all__ = [
    "InMemoryLedger",
    "RedisLedger",
]
