from __future__ import annotations

from typing import Optional, Sequence

from ..types.aliases import BlockSize
from ..types.blocks import Block
from .base import PlacementStrategy


class FirstFitStrategy(PlacementStrategy):
    __slots__ = ()

    name = "first-fit"

    def select(self, blocks: Sequence[Block], size: BlockSize) -> Optional[int]:
        for i, _ in self.candidates(blocks, size):
            return i
        return None
