"""
Type definitions and protocols for the partition engine.

This module provides the block data structures, enums, protocols
and aliases used throughout the package.
"""

from .aliases import (
    Address,
    BlockSize,
    ProcessID
)
from .blocks import Block, PlacedBlock
from .enums import (
    AllocationStrategy,
    ResultStatus
)
from .protocols import IPlacementStrategy

__all__ = [
    # Blocks
    "Block",
    "PlacedBlock",

    # Enums
    "AllocationStrategy",
    "ResultStatus",

    # Protocols
    "IPlacementStrategy",

    # Type aliases
    "Address",
    "BlockSize",
    "ProcessID",
]
