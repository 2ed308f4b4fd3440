"""ID Generation System.

ULID-based identifiers for block instances and generation passes.

- ULIDs: Lexicographically sortable, timestamp-based
- Type-safe: NewType wrappers for different ID categories
- Prefixed: Type-specific prefixes for debugging (blk_*, gen_*)
"""

from typing import NewType
from ulid import ULID

BlockID = NewType("BlockID", str)
"""Placed block instance identifier"""

GenerationID = NewType("GenerationID", str)
"""Generation / preview pass identifier"""


class Prefix:
    """ID prefix constants."""

    BLOCK = "blk"
    GENERATION = "gen"


def _prefixed(prefix: str) -> str:
    return f"{prefix}_{ULID()}"


def new_block_id() -> BlockID:
    """Generate new block instance ID."""
    return BlockID(_prefixed(Prefix.BLOCK))


def new_generation_id() -> GenerationID:
    """Generate new generation pass ID."""
    return GenerationID(_prefixed(Prefix.GENERATION))


__all__ = [
    "BlockID",
    "GenerationID",
    "Prefix",
    "new_block_id",
    "new_generation_id",
]
