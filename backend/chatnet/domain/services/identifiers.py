"""Random identifiers for entities created by handlers."""

from typing import Callable
from uuid import uuid4

IdFactory = Callable[[], str]


def generate_uuid() -> str:
    """Return a random version-4 UUID in canonical 8-4-4-4-12 form."""
    return str(uuid4())
