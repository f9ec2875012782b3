"""Result types returned by media store operations."""

from dataclasses import dataclass
from enum import Enum


class DeletionStatus(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class DeletionResult:
    """Outcome of a best-effort media store deletion.

    Lifecycle code is free to ignore it; a failed deletion never blocks
    the product mutation that triggered it.
    """

    public_id: str
    status: DeletionStatus
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is DeletionStatus.DELETED
