from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .aliases import Address, BlockSize, ProcessID


@dataclass(frozen=True, slots=True)
class Block:
    owner: Optional[ProcessID]
    size: BlockSize

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ValueError(f"Block size must be a positive integer: {self.size!r}")

    @property
    def is_free(self) -> bool:
        return self.owner is None

    def label(self, unit: str = "KB") -> str:
        if self.is_free:
            return f"Free ({self.size} {unit})"
        return f"{self.owner} ({self.size} {unit})"


@dataclass(frozen=True, slots=True)
class PlacedBlock:
    """A block together with the address range it covers."""
    block: Block
    start: Address

    @property
    def end(self) -> Address:
        return Address(self.start + self.block.size)

    @property
    def owner(self) -> Optional[ProcessID]:
        return self.block.owner

    @property
    def size(self) -> BlockSize:
        return self.block.size

    @property
    def is_free(self) -> bool:
        return self.block.is_free
