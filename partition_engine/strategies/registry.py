"""
Placement strategy registry.

Maps strategy names and ``AllocationStrategy`` members to strategy
instances, so the engine can resolve whatever the caller hands it.
"""

from __future__ import annotations
from threading import RLock
from typing import Dict, List, Union

from ..types.enums import AllocationStrategy
from ..types.protocols import IPlacementStrategy
from .best_fit import BestFitStrategy
from .first_fit import FirstFitStrategy

StrategyLike = Union[AllocationStrategy, str, IPlacementStrategy]


class StrategyRegistry:
    """Name-keyed collection of placement strategies."""

    __slots__ = ('_strategies', '_lock')

    def __init__(self):
        self._strategies: Dict[str, IPlacementStrategy] = {}
        self._lock = RLock()

    def register(self, strategy: IPlacementStrategy, *aliases: str) -> None:
        """Register a strategy under its own name plus any aliases."""
        if not isinstance(strategy, IPlacementStrategy) or not strategy.name:
            raise TypeError(f"Not a named placement strategy: {strategy!r}")

        with self._lock:
            for key in (strategy.name, *aliases):
                self._strategies[self._normalize(key)] = strategy

    def resolve(self, strategy: StrategyLike) -> IPlacementStrategy:
        if isinstance(strategy, AllocationStrategy):
            key = strategy.label
        elif isinstance(strategy, str):
            key = strategy
        elif isinstance(strategy, IPlacementStrategy):
            return strategy
        else:
            raise TypeError(f"Cannot resolve placement strategy from {strategy!r}")

        with self._lock:
            try:
                return self._strategies[self._normalize(key)]
            except KeyError:
                raise ValueError(f"Unknown allocation strategy: {key!r}") from None

    def names(self) -> List[str]:
        with self._lock:
            return sorted({s.name for s in self._strategies.values()})

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        with self._lock:
            return self._normalize(key) in self._strategies

    @staticmethod
    def _normalize(key: str) -> str:
        return key.strip().lower().replace('_', '-')


default_registry = StrategyRegistry()
default_registry.register(FirstFitStrategy(), "first")
default_registry.register(BestFitStrategy(), "best")


def register_strategy(strategy: IPlacementStrategy, *aliases: str) -> None:
    default_registry.register(strategy, *aliases)


def resolve_strategy(strategy: StrategyLike) -> IPlacementStrategy:
    return default_registry.resolve(strategy)
