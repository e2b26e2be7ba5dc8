from .base import PlacementStrategy
from .best_fit import BestFitStrategy
from .first_fit import FirstFitStrategy
from .registry import (
    StrategyLike,
    StrategyRegistry,
    default_registry,
    register_strategy,
    resolve_strategy,
)

__all__ = [
    "PlacementStrategy",
    "FirstFitStrategy",
    "BestFitStrategy",
    "StrategyLike",
    "StrategyRegistry",
    "default_registry",
    "register_strategy",
    "resolve_strategy",
]
