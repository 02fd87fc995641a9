"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Ledger implementations (in-memory, Redis)
- events/: Event sinks (in-memory, logging, Redis pub/sub)
- identity.py: ContextVar-backed caller identity
"""
