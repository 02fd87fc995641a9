"""Helpers for the ordered reference lists held by aggregates."""

from typing import Any, MutableSequence


def remove_element(sequence: MutableSequence[Any], value: Any) -> None:
    """Remove the first element equal to ``value``; no-op when absent."""
    for index, element in enumerate(sequence):
        if element == value:
            del sequence[index]
            return
