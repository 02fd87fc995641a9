"""
APPLICATION LAYER - Transactions & Orchestration

This layer contains:
- commands/  → One command + handler per ledger transaction
- queries/   → Read-only views of chats and the network
- dto/       → Boundary models for raw transaction records
- common/    → Shared interfaces (Command, Query base classes)
- processor  → Validates, dispatches and commits transactions

Rules:
- Depends on Domain layer only (plus pydantic at the boundary)
- Handlers work through a UnitOfWork handed in by the processor
"""
