from __future__ import annotations
from functools import lru_cache

from .engine import PartitionEngine
from .types.enums import AllocationStrategy


@lru_cache(maxsize=1)
def get_default_engine() -> PartitionEngine:
    return create_reference_engine()


def create_engine(**kwargs) -> PartitionEngine:
    return PartitionEngine(**kwargs)


def create_reference_engine() -> PartitionEngine:
    return PartitionEngine(
        total_memory=1024,  # 1024 KB
        default_strategy=AllocationStrategy.BEST_FIT,
        unit="KB"
    )


def create_first_fit_engine(total_memory: int = 1024) -> PartitionEngine:
    return PartitionEngine(
        total_memory=total_memory,
        default_strategy=AllocationStrategy.FIRST_FIT
    )
