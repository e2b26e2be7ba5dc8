"""
partition-engine - Dynamic memory partition simulator

Models allocation over a fixed-size address space split into contiguous
blocks, each free or owned by a named process.

Key Features:
- First-fit and best-fit placement behind a pluggable strategy registry
- Block splitting on allocation and eager coalescing on release
- Immutable snapshots and outcome objects instead of raised errors
- Fragmentation and usage statistics
"""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

# Engine
from .engine import PartitionEngine
from .factory import (
    create_engine,
    create_first_fit_engine,
    create_reference_engine,
    get_default_engine
)
from .result import OperationResult
from .stats import PartitionStats

# Strategies
from .strategies import (
    BestFitStrategy,
    FirstFitStrategy,
    PlacementStrategy,
    StrategyRegistry,
    register_strategy
)

# Types
from .types import (
    AllocationStrategy,
    Block,
    PlacedBlock,
    ProcessID,
    ResultStatus
)

# Exceptions
from .exceptions import (
    InsufficientMemory,
    InvalidRequest,
    PartitionError,
    UnknownProcess
)

__all__ = [
    # Engine
    "PartitionEngine",
    "create_engine",
    "create_first_fit_engine",
    "create_reference_engine",
    "get_default_engine",
    "OperationResult",
    "PartitionStats",

    # Strategies
    "PlacementStrategy",
    "FirstFitStrategy",
    "BestFitStrategy",
    "StrategyRegistry",
    "register_strategy",

    # Types
    "AllocationStrategy",
    "Block",
    "PlacedBlock",
    "ProcessID",
    "ResultStatus",

    # Exceptions
    "PartitionError",
    "InvalidRequest",
    "InsufficientMemory",
    "UnknownProcess",
]

VERSION_INFO = tuple(map(int, __version__.split('.')))

def get_version() -> str:
    """Get the current version string."""
    return __version__
