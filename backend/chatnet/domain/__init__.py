"""
DOMAIN LAYER - Chat network rules

This layer contains:
- Entities: User, Member, Message, Chat, ChatNetwork
- Value Objects: typed references (UserId, MemberId, ChatId, ...)
- Ports: registry / ledger / identity / event sink interfaces
- Services: membership policy, identifier generation, sequence helpers
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no Redis, Pydantic, Dishka)
2. NO I/O operations
3. Only depends on Python stdlib
"""
