from __future__ import annotations
from typing import Optional

from .types.aliases import BlockSize, ProcessID


class PartitionError(Exception):
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class InvalidRequest(PartitionError):
    def __init__(self, message: str, process_id: Optional[ProcessID] = None,
                 size: Optional[object] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.process_id = process_id
        self.size = size


class InsufficientMemory(PartitionError):
    def __init__(self, message: str, requested_size: Optional[BlockSize] = None,
                 largest_free: Optional[BlockSize] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.requested_size = requested_size
        self.largest_free = largest_free


class UnknownProcess(PartitionError):
    def __init__(self, message: str, process_id: Optional[ProcessID] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.process_id = process_id


__all__ = [
    'PartitionError',
    'InvalidRequest',
    'InsufficientMemory',
    'UnknownProcess',
]
