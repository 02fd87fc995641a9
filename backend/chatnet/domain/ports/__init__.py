"""
PORTS - Interfaces the host platform implements

The core never talks to storage or transport directly:
- registry.py      → keyed store for one entity type
- ledger.py        → transaction boundary owning one registry per type
- identity.py      → authenticated caller of the running transaction
- event_sink.py    → notification channel for committed events

Implementations live in chatnet.infrastructure.
"""

from chatnet.domain.ports.registry import Registry
from chatnet.domain.ports.ledger import Ledger, UnitOfWork
from chatnet.domain.ports.identity import IdentityProvider
from chatnet.domain.ports.event_sink import EventSink

__all__ = [
    "Registry",
    "Ledger",
    "UnitOfWork",
    "IdentityProvider",
    "EventSink",
]
