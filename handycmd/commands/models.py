# handycmd/commands/models.py
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CommandKind(str, Enum):
    """Statement kinds understood in the command file."""
    CREATE_FILE = "create_file"
    CREATE_FOLDER = "create_folder"
    DELETE_FILE = "delete_file"
    DELETE_FOLDER = "delete_folder"
    DELETE_FORCE = "delete_force"
    WRITE = "write"
    APPEND = "append"
    RENAME = "rename"


class OutcomeStatus(str, Enum):
    """Result of executing one extracted command."""
    SUCCEEDED = "succeeded"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


class MessageCategory(str, Enum):
    """Category of a reported line."""
    SUCCESS = "success"
    WARN = "warn"
    ERROR = "error"
    INFO = "info"


class ExtractedCommand(BaseModel):
    """One matched statement occurrence."""
    model_config = ConfigDict(frozen=True)

    kind: CommandKind = Field(..., description="The statement kind")
    args: Tuple[str, ...] = Field(..., description="Captured values, trimmed, in slot order")

    @property
    def path(self) -> str:
        return self.args[0]


class OperationOutcome(BaseModel):
    """Outcome of one occurrence: succeeded, already exists or failed."""
    model_config = ConfigDict(frozen=True)

    kind: CommandKind = Field(..., description="The statement kind")
    status: OutcomeStatus = Field(..., description="What happened")
    targets: Tuple[str, ...] = Field(..., description="Path(s) the effect acted on")
    cause: Optional[str] = Field(None, description="Error description for failed outcomes")

    @classmethod
    def succeeded(cls, kind: CommandKind, *targets: str) -> "OperationOutcome":
        return cls(kind=kind, status=OutcomeStatus.SUCCEEDED, targets=targets)

    @classmethod
    def already_exists(cls, kind: CommandKind, *targets: str) -> "OperationOutcome":
        return cls(kind=kind, status=OutcomeStatus.ALREADY_EXISTS, targets=targets)

    @classmethod
    def failed(cls, kind: CommandKind, *targets: str, cause: BaseException) -> "OperationOutcome":
        return cls(kind=kind, status=OutcomeStatus.FAILED, targets=targets, cause=str(cause) or type(cause).__name__)

    @property
    def ok(self) -> bool:
        return self.status != OutcomeStatus.FAILED


class ReportMessage(BaseModel):
    """A categorized line emitted by the reporter."""
    model_config = ConfigDict(frozen=True)

    category: MessageCategory
    text: str


def count_failures(outcomes: List[OperationOutcome]) -> int:
    return sum(1 for outcome in outcomes if not outcome.ok)
