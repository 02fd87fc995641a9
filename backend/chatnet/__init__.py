"""chatnet - chat network membership and messaging as ledger transactions."""

__version__ = "0.1.0"
