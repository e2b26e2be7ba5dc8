from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence, Tuple

from ..types.aliases import BlockSize
from ..types.blocks import Block


class PlacementStrategy(ABC):
    """Chooses which free block an allocation of a given size goes into.

    Implementations only pick an index; splitting the chosen block is the
    engine's job, so a new strategy never has to repeat that logic.
    """

    __slots__ = ()

    name: str = ""

    @abstractmethod
    def select(self, blocks: Sequence[Block], size: BlockSize) -> Optional[int]: ...

    @staticmethod
    def candidates(blocks: Sequence[Block], size: BlockSize) -> Iterator[Tuple[int, Block]]:
        """Yield (index, block) for every free block that can hold ``size``, in address order."""
        for i, block in enumerate(blocks):
            if block.is_free and block.size >= size:
                yield i, block

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
