"""
Presentation Layer - host-facing entry points.

This layer contains:
- replay.py: runs a JSON script of transactions against a processor
"""
