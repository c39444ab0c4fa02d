"""Completion values for actions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from roombot.domain.errors import ActionError


class ActionStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ABANDONED = "abandoned"


@dataclass(frozen=True)
class ActionResult:
    """What an action's future settles to: exactly one of these per action."""

    status: ActionStatus
    value: Any = None
    error: Optional[ActionError] = None

    @property
    def success(self) -> bool:
        return self.status is ActionStatus.SUCCEEDED

    @property
    def abandoned(self) -> bool:
        return self.status is ActionStatus.ABANDONED

    @classmethod
    def succeeded(cls, value: Any) -> "ActionResult":
        return cls(status=ActionStatus.SUCCEEDED, value=value)

    @classmethod
    def failed(cls, error: ActionError) -> "ActionResult":
        return cls(status=ActionStatus.FAILED, error=error)

    @classmethod
    def superseded(cls) -> "ActionResult":
        return cls(status=ActionStatus.ABANDONED)
