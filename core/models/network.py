from dataclasses import dataclass
from enum import Enum

from core.models.user import User


class OperationState(str, Enum):
    """Lifecycle of one asynchronous fetch as seen by the screen."""

    NOT_STARTED = "not_started"
    PENDING = "pending"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


@dataclass(frozen=True)
class OperationSnapshot:
    state: OperationState
    timestamp: float  # Time when the operation was created or settled
    data: tuple[User, ...] | None = None  # Users in server order when succeeded
    error: str | None = None  # Error message when failed

    @property
    def has_data(self) -> bool:
        return self.data is not None

    @property
    def has_error(self) -> bool:
        return self.error is not None


NOT_STARTED = OperationSnapshot(state=OperationState.NOT_STARTED, timestamp=0.0)
