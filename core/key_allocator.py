"""
Key Allocator
Picks unused keys for the sprite table
"""

from typing import AbstractSet


def next_key(existing_keys: AbstractSet[str], start: int) -> str:
    """
    Return the first integer key, counting up from start, not in existing_keys

    The caller must add the returned key to existing_keys before asking again.

    Args:
        existing_keys: Keys already used in the sprite table
        start: First candidate value

    Returns:
        The key as a string
    """
    counter = max(0, int(start))
    while str(counter) in existing_keys:
        counter += 1
    return str(counter)
