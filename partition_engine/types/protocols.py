from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from .aliases import BlockSize
from .blocks import Block


@runtime_checkable
class IPlacementStrategy(Protocol):
    @property
    def name(self) -> str:
        ...

    def select(self, blocks: Sequence[Block], size: BlockSize) -> Optional[int]:
        ...

