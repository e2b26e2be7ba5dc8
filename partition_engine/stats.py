from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Sequence, Tuple

import numpy as np

from .types.aliases import Address
from .types.blocks import Block, PlacedBlock


@dataclass(frozen=True)
class PartitionStats:
    total: int
    used: int
    free: int
    block_count: int
    free_block_count: int
    largest_free_block: int
    allocation_count: int = 0
    deallocation_count: int = 0
    failed_allocations: int = 0

    @cached_property
    def usage_ratio(self) -> float:
        return self.used / self.total if self.total > 0 else 0.0

    @cached_property
    def fragmentation_ratio(self) -> float:
        return 1.0 - (self.largest_free_block / self.free) if self.free > 0 else 0.0

    @classmethod
    def from_blocks(cls, blocks: Sequence[Block], allocation_count: int = 0,
                    deallocation_count: int = 0, failed_allocations: int = 0) -> PartitionStats:
        sizes = np.fromiter((b.size for b in blocks), dtype=np.int64, count=len(blocks))
        free_mask = np.fromiter((b.is_free for b in blocks), dtype=bool, count=len(blocks))
        free_sizes = sizes[free_mask]

        return cls(
            total=int(sizes.sum()),
            used=int(sizes[~free_mask].sum()),
            free=int(free_sizes.sum()),
            block_count=len(blocks),
            free_block_count=int(free_mask.sum()),
            largest_free_block=int(free_sizes.max()) if free_sizes.size else 0,
            allocation_count=allocation_count,
            deallocation_count=deallocation_count,
            failed_allocations=failed_allocations,
        )


def place_blocks(blocks: Sequence[Block]) -> Tuple[PlacedBlock, ...]:
    """Annotate each block with its start address."""
    sizes = np.fromiter((b.size for b in blocks), dtype=np.int64, count=len(blocks))
    starts = np.concatenate(([0], np.cumsum(sizes)[:-1])) if len(blocks) else sizes
    return tuple(PlacedBlock(block, Address(int(start))) for block, start in zip(blocks, starts))
