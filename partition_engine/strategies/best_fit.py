from __future__ import annotations

from typing import Optional, Sequence

from ..types.aliases import BlockSize
from ..types.blocks import Block
from .base import PlacementStrategy


class BestFitStrategy(PlacementStrategy):
    __slots__ = ()

    name = "best-fit"

    def select(self, blocks: Sequence[Block], size: BlockSize) -> Optional[int]:
        best_size = None
        best_index = None

        # strict < keeps the lowest address on ties
        for i, block in self.candidates(blocks, size):
            if best_size is None or block.size < best_size:
                best_size = block.size
                best_index = i

        return best_index
