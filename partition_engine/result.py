from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import PartitionError
from .types.blocks import Block
from .types.enums import ResultStatus


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of one engine call together with the partition it left behind.

    Failures are expected outcomes here, so the error is carried rather than
    raised. Call ``raise_for_error`` to turn it into an exception.
    """
    operation: str
    status: ResultStatus
    blocks: Tuple[Block, ...]
    error: Optional[PartitionError] = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else ""

    def raise_for_error(self) -> OperationResult:
        if self.error is not None:
            raise self.error
        return self
