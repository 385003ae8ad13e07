"""Test configuration and fixtures for neovate-wrapped.

Timestamps in fixtures are naive ISO strings, which the parser reads as local
time, so calendar dates do not depend on the machine's timezone.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from neovate_wrapped.models import Message


def message_record(
    timestamp: str,
    role: str = "user",
    content: Any = "Hello",
    model: Optional[str] = None,
    usage: Optional[Dict[str, int]] = None,
    tool_calls: Optional[List[Dict[str, Any]]] = None,
    session_id: str = "session-1",
) -> Dict[str, Any]:
    """Build a raw message record as it appears in a session file."""
    record: Dict[str, Any] = {
        "type": "message",
        "uuid": f"uuid-{timestamp}",
        "parentUuid": None,
        "role": role,
        "content": content,
        "timestamp": timestamp,
        "sessionId": session_id,
    }
    if model is not None:
        record["model"] = model
    if usage is not None:
        record["usage"] = usage
    if tool_calls is not None:
        record["tool_calls"] = tool_calls
    return record


def make_message(timestamp: str, **kwargs: Any) -> Message:
    """Build a parsed Message from the same arguments as message_record()."""
    msg = Message.from_json(message_record(timestamp, **kwargs))
    assert msg is not None
    return msg


def write_session(project_dir: Path, name: str, lines: List[Any]) -> Path:
    """Write a session file; dict entries are JSON-encoded, strings written raw."""
    project_dir.mkdir(parents=True, exist_ok=True)
    session_file = project_dir / name
    with open(session_file, "w", encoding="utf-8") as f:
        for line in lines:
            f.write((json.dumps(line) if isinstance(line, dict) else line) + "\n")
    return session_file


@pytest.fixture
def data_root(tmp_path):
    """An empty data root directory."""
    root = tmp_path / "projects"
    root.mkdir()
    return root


@pytest.fixture
def scenario_root(data_root):
    """Two projects: one healthy session with a corrupt line, one unreadable.

    Project A holds one user message and two assistant messages on
    anthropic/claude-3 with 100 input / 50 output tokens each. Project B's
    only session file is a directory, so it cannot be read.
    """
    usage = {"input_tokens": 100, "output_tokens": 50}
    write_session(
        data_root / "-Users-test-alpha",
        "session-a.jsonl",
        [
            message_record("2025-03-10T09:00:00", role="user", content="Fix the bug"),
            message_record(
                "2025-03-10T09:01:00",
                role="assistant",
                model="anthropic/claude-3",
                usage=usage,
                content=[
                    {"type": "text", "text": "Looking"},
                    {"type": "tool_use", "name": "read", "input": {"path": "a.py"}},
                ],
            ),
            '{"type": "message", "role": "assistant", "content": ',
            message_record(
                "2025-03-11T10:00:00",
                role="assistant",
                model="anthropic/claude-3",
                usage=usage,
                tool_calls=[{"name": "bash"}],
            ),
        ],
    )
    broken = data_root / "-Users-test-beta"
    broken.mkdir()
    (broken / "session-b.jsonl").mkdir()
    return data_root
