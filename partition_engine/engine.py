"""
Memory partition engine.

This module holds the block list for a fixed-size address space and
implements allocation (select, split) and release (free, coalesce)
over it. Placement is delegated to a strategy looked up in the
strategy registry.
"""

from __future__ import annotations
import logging
import sys
from threading import RLock
from typing import List, Optional, Set, Tuple

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from .exceptions import InsufficientMemory, InvalidRequest, PartitionError, UnknownProcess
from .result import OperationResult
from .stats import PartitionStats, place_blocks
from .strategies.registry import StrategyLike, StrategyRegistry, default_registry
from .types.aliases import BlockSize, ProcessID
from .types.blocks import Block, PlacedBlock
from .types.enums import AllocationStrategy, ResultStatus

logger = logging.getLogger(__name__)


class PartitionEngine:
    """Owns the partition of a fixed address range into free and owned blocks."""

    __slots__ = (
        '_total_memory', '_blocks', '_lock', '_default_strategy', '_registry', '_unit',
        '_allocation_count', '_deallocation_count', '_failed_allocations'
    )

    def __init__(
        self,
        total_memory: int = 1024,
        default_strategy: StrategyLike = AllocationStrategy.BEST_FIT,
        unit: str = "KB",
        registry: Optional[StrategyRegistry] = None
    ):
        if isinstance(total_memory, bool) or not isinstance(total_memory, int) or total_memory <= 0:
            raise ValueError(f"Total memory must be a positive integer: {total_memory!r}")

        self._total_memory = total_memory
        self._registry = registry if registry is not None else default_registry
        # resolve eagerly so a bad default fails at construction
        self._registry.resolve(default_strategy)
        self._default_strategy = default_strategy
        self._unit = unit
        self._lock = RLock()
        self._blocks: List[Block] = [Block(None, BlockSize(total_memory))]
        self._allocation_count = 0
        self._deallocation_count = 0
        self._failed_allocations = 0

    @property
    def total_memory(self) -> int:
        return self._total_memory

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def default_strategy(self) -> StrategyLike:
        return self._default_strategy

    def current_blocks(self) -> Tuple[Block, ...]:
        with self._lock:
            return tuple(self._blocks)

    def layout(self) -> Tuple[PlacedBlock, ...]:
        return place_blocks(self.current_blocks())

    def owners(self) -> Set[ProcessID]:
        with self._lock:
            return {b.owner for b in self._blocks if b.owner is not None}

    def stats(self) -> PartitionStats:
        with self._lock:
            return PartitionStats.from_blocks(
                self._blocks,
                allocation_count=self._allocation_count,
                deallocation_count=self._deallocation_count,
                failed_allocations=self._failed_allocations,
            )

    def allocate(self, process_id: str, size: int,
                 strategy: Optional[StrategyLike] = None) -> OperationResult:
        """Place ``size`` units for ``process_id`` using ``strategy``.

        Returns an ``OperationResult`` whose status is ``OK``, ``INVALID_REQUEST``
        or ``INSUFFICIENT_MEMORY``. The partition only changes on ``OK``.
        Raises ``TypeError`` or ``ValueError`` if the strategy picks an index
        that is not a free block large enough for the request.
        """
        placement = self._registry.resolve(strategy if strategy is not None else self._default_strategy)

        with self._lock:
            error = self._validate_request(process_id, size)
            if error is not None:
                self._failed_allocations += 1
                logger.warning("Rejected allocation: %s", error.message)
                return self._result("allocate", ResultStatus.INVALID_REQUEST, error)

            index = placement.select(self._blocks, BlockSize(size))
            if index is None:
                self._failed_allocations += 1
                largest = max((b.size for b in self._blocks if b.is_free), default=0)
                error = InsufficientMemory(
                    f"No free block of at least {size} {self._unit} for {process_id!r} "
                    f"({placement.name}, largest free block is {largest} {self._unit})",
                    requested_size=BlockSize(size),
                    largest_free=BlockSize(largest),
                )
                logger.info(error.message)
                return self._result("allocate", ResultStatus.INSUFFICIENT_MEMORY, error)

            chosen = self._checked_candidate(placement.name, index, size)
            replacement = [Block(ProcessID(process_id), BlockSize(size))]
            if chosen.size > size:
                replacement.append(Block(None, BlockSize(chosen.size - size)))
            self._blocks[index:index + 1] = replacement

            self._allocation_count += 1
            logger.debug("Allocated %d %s to %r at block %d (%s, remainder %d)",
                         size, self._unit, process_id, index, placement.name, chosen.size - size)
            return self._result("allocate", ResultStatus.OK)

    def submit(self, process_id_text: Optional[str], size_text: Optional[str],
               strategy: Optional[StrategyLike] = None) -> OperationResult:
        """Allocate from raw form text: an id field and a size field.

        The size must be plain decimal digits. Unlike a browser's ``parseInt``,
        trailing text such as ``"300KB"`` or ``"12.5"`` is rejected rather than
        truncated, and so are Python-only spellings like ``"1_000"``.
        """
        process_id = (process_id_text or "").strip()
        size_field = (size_text or "").strip()
        if not (size_field.isascii() and size_field.isdigit()):
            with self._lock:
                self._failed_allocations += 1
            error = InvalidRequest(f"Size must be a whole number, got {size_text!r}",
                                   process_id=ProcessID(process_id), size=size_text)
            logger.warning("Rejected allocation: %s", error.message)
            return self._result("allocate", ResultStatus.INVALID_REQUEST, error)

        return self.allocate(process_id, int(size_field), strategy)

    def free(self, process_id: str) -> OperationResult:
        """Release the block owned by ``process_id`` and merge free neighbours."""
        with self._lock:
            index = self._find_owner(process_id)
            if index is None:
                error = UnknownProcess(f"No block is allocated to {process_id!r}",
                                       process_id=process_id)
                logger.warning(error.message)
                return self._result("free", ResultStatus.UNKNOWN_PROCESS, error)

            self._blocks[index] = Block(None, self._blocks[index].size)
            merged = self._coalesce()

            self._deallocation_count += 1
            logger.debug("Freed block %d held by %r (%d merges)", index, process_id, merged)
            return self._result("free", ResultStatus.OK)

    def reset(self) -> Self:
        with self._lock:
            self._blocks = [Block(None, BlockSize(self._total_memory))]
            self._allocation_count = 0
            self._deallocation_count = 0
            self._failed_allocations = 0
        return self

    def _validate_request(self, process_id: object, size: object) -> Optional[InvalidRequest]:
        if not isinstance(process_id, str) or not process_id.strip():
            return InvalidRequest("A process id is required", process_id=process_id, size=size)

        if process_id != process_id.strip():
            return InvalidRequest(f"Process id {process_id!r} has surrounding whitespace",
                                  process_id=ProcessID(process_id), size=size)

        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            return InvalidRequest(f"Size must be a positive integer, got {size!r}",
                                  process_id=ProcessID(process_id), size=size)

        if self._find_owner(process_id) is not None:
            return InvalidRequest(f"Process {process_id!r} already holds a block",
                                  process_id=ProcessID(process_id), size=size)

        return None

    def _checked_candidate(self, strategy_name: str, index: object, size: int) -> Block:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Strategy {strategy_name!r} returned a non-integer index: {index!r}")

        if not 0 <= index < len(self._blocks):
            raise ValueError(f"Strategy {strategy_name!r} returned out-of-range index {index}")

        chosen = self._blocks[index]
        if not chosen.is_free or chosen.size < size:
            raise ValueError(
                f"Strategy {strategy_name!r} chose block {index} ({chosen.label(self._unit)}) "
                f"which cannot hold {size} {self._unit}"
            )
        return chosen

    def _find_owner(self, process_id: object) -> Optional[int]:
        if process_id is None:
            return None
        for i, block in enumerate(self._blocks):
            if block.owner == process_id:
                return i
        return None

    def _coalesce(self) -> int:
        merges = 0
        i = 0
        while i < len(self._blocks) - 1:
            left, right = self._blocks[i], self._blocks[i + 1]
            if left.is_free and right.is_free:
                self._blocks[i:i + 2] = [Block(None, BlockSize(left.size + right.size))]
                merges += 1
                # stay at i: the merged block may also touch the next one
            else:
                i += 1
        return merges

    def _result(self, operation: str, status: ResultStatus,
                error: Optional[PartitionError] = None) -> OperationResult:
        with self._lock:
            return OperationResult(operation, status, tuple(self._blocks), error)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(total_memory={self._total_memory}, "
                f"blocks={len(self._blocks)})")
