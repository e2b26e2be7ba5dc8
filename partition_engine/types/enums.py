"""
Enumeration types for the partition engine.

This module defines the placement strategies the engine ships with
and the status codes an operation can end in.
"""

from __future__ import annotations

from enum import IntEnum


class AllocationStrategy(IntEnum):
    """Built-in placement strategies."""
    FIRST_FIT = 1
    BEST_FIT = 2

    @property
    def label(self) -> str:
        return self.name.lower().replace('_', '-')


class ResultStatus(IntEnum):
    """Outcome of an allocate or free call."""
    OK = 0
    INVALID_REQUEST = 1
    INSUFFICIENT_MEMORY = 2
    UNKNOWN_PROCESS = 3
