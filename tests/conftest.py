"""Shared test fixtures for agent-notifier."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from agent_notifier.events import (
    AgentTurnComplete,
    ApprovalRequested,
    ApprovalResponse,
    ApprovalType,
    SessionEnd,
    SessionStart,
    TurnCancelled,
    UserPromptSubmit,
)

THREAD_ID = "b5f6c1c2-1111-2222-3333-444455556666"


@pytest.fixture
def thread_id() -> str:
    return THREAD_ID


@pytest.fixture
def session_start() -> SessionStart:
    return SessionStart(thread_id=THREAD_ID, cwd="/Users/example/project", pid=12345)


@pytest.fixture
def all_notifications():
    """One instance of every notification variant."""
    return [
        SessionStart(thread_id=THREAD_ID, cwd="/Users/example/project", pid=12345),
        SessionEnd(thread_id=THREAD_ID),
        UserPromptSubmit(
            thread_id=THREAD_ID,
            turn_id="1",
            cwd="/Users/example/project",
            prompt="Fix the bug in main.py",
        ),
        ApprovalRequested(
            thread_id=THREAD_ID,
            turn_id="1",
            approval_type=ApprovalType.EXEC,
            description="pytest -q",
        ),
        ApprovalResponse(thread_id=THREAD_ID, request_id="mcp-7", approved=False),
        AgentTurnComplete(
            thread_id=THREAD_ID,
            turn_id="1",
            cwd="/Users/example/project",
            input_messages=["Rename `foo` to `bar`."],
            last_assistant_message="Done.",
        ),
        TurnCancelled(thread_id=THREAD_ID, turn_id="2"),
    ]


@pytest.fixture
def popen_mock():
    """Intercept process launches made by the notifier."""
    with patch("agent_notifier.notifier.subprocess.Popen") as mock_popen:
        mock_popen.return_value = MagicMock(pid=4242)
        yield mock_popen
