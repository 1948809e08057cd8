"""Notification variants emitted over the lifecycle of an agent session."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _kebab(name: str) -> str:
    return name.replace("_", "-")


class ApprovalType(str, Enum):
    """Type of approval being requested from the user."""

    EXEC = "exec"
    PATCH = "patch"
    ELICITATION = "elicitation"


class _NotificationBase(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=_kebab,
        populate_by_name=True,
    )


def _require_one_correlation_id(turn_id: str | None, request_id: str | None) -> None:
    # turn_id correlates exec/patch flows, request_id correlates elicitations
    if (turn_id is None) == (request_id is None):
        raise ValueError("exactly one of turn_id or request_id must be set")


class SessionStart(_NotificationBase):
    """Fired when a new session starts."""

    type: Literal["session-start"] = "session-start"
    thread_id: str
    cwd: str
    pid: int = Field(ge=0, le=2**32 - 1, description="Process ID of the agent")


class SessionEnd(_NotificationBase):
    """Fired when a session ends."""

    type: Literal["session-end"] = "session-end"
    thread_id: str


class UserPromptSubmit(_NotificationBase):
    """Fired when the user submits a prompt and the agent starts working."""

    type: Literal["user-prompt-submit"] = "user-prompt-submit"
    thread_id: str
    turn_id: str
    cwd: str
    prompt: str


class ApprovalRequested(_NotificationBase):
    """Fired when the agent needs user approval (exec, patch or elicitation)."""

    type: Literal["approval-requested"] = "approval-requested"
    thread_id: str
    turn_id: str | None = None
    request_id: str | None = None
    approval_type: ApprovalType
    description: str = Field(description="Human-readable summary of the request")

    @model_validator(mode="after")
    def validate_correlation(self) -> ApprovalRequested:
        _require_one_correlation_id(self.turn_id, self.request_id)
        return self


class ApprovalResponse(_NotificationBase):
    """Fired when the user answers an approval request."""

    type: Literal["approval-response"] = "approval-response"
    thread_id: str
    turn_id: str | None = None
    request_id: str | None = None
    approved: bool

    @model_validator(mode="after")
    def validate_correlation(self) -> ApprovalResponse:
        _require_one_correlation_id(self.turn_id, self.request_id)
        return self


class AgentTurnComplete(_NotificationBase):
    """Fired when the agent completes a turn."""

    type: Literal["agent-turn-complete"] = "agent-turn-complete"
    thread_id: str
    turn_id: str
    cwd: str
    input_messages: tuple[str, ...] = Field(
        description="Messages the user sent to start the turn"
    )
    last_assistant_message: str | None = None


class TurnCancelled(_NotificationBase):
    """Fired when a turn is interrupted before it completes."""

    type: Literal["turn-cancelled"] = "turn-cancelled"
    thread_id: str
    turn_id: str


Notification = Annotated[
    Union[
        SessionStart,
        SessionEnd,
        UserPromptSubmit,
        ApprovalRequested,
        ApprovalResponse,
        AgentTurnComplete,
        TurnCancelled,
    ],
    Field(discriminator="type"),
]

NOTIFICATION_TYPES: tuple[type[BaseModel], ...] = (
    SessionStart,
    SessionEnd,
    UserPromptSubmit,
    ApprovalRequested,
    ApprovalResponse,
    AgentTurnComplete,
    TurnCancelled,
)
