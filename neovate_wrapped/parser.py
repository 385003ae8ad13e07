"""JSONL parsing functions for Neovate Wrapped.

This module provides functions to parse Neovate session files:
- iter_records(): Decode JSONL lines independently, skipping bad ones
- parse_jsonl(): Decode a whole JSONL document
- parse_messages(): Keep only message records
- read_session(): Parse a session file into messages and a session record
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .constants import SESSION_FILE_SUFFIX
from .models import Message, SessionRecord

logger = logging.getLogger(__name__)


def iter_records(lines: Iterable[Union[str, bytes]]) -> Iterator[Dict[str, Any]]:
    """Decode each non-blank line as an independent JSON object.

    Lines that fail to decode (invalid UTF-8 or invalid JSON), or decode to
    something other than an object, are dropped. One bad line never affects
    its neighbours.

    Args:
        lines: Raw lines of a JSONL document, as text or UTF-8 bytes

    Yields:
        Decoded JSON objects in file order
    """
    for lineno, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Skipping line %d with invalid UTF-8", lineno)
                continue
        line = line.strip()
        if not line:
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            logger.debug("Skipping undecodable line %d", lineno)
            continue
        if isinstance(data, dict):
            yield data


def parse_jsonl(text: Union[str, bytes]) -> List[Dict[str, Any]]:
    """Decode a JSONL document (text or UTF-8 bytes) into its valid records."""
    return list(iter_records(text.splitlines()))


def parse_messages(records: Iterable[Dict[str, Any]], session_id: str = "") -> List[Message]:
    """Convert decoded records into messages, ignoring other record kinds."""
    messages = []
    for data in records:
        msg = Message.from_json(data, session_id)
        if msg is not None:
            messages.append(msg)
    return messages


def session_id_from_path(file_path: Path) -> str:
    """Derive the session identifier from a session filename."""
    name = file_path.name
    if name.endswith(SESSION_FILE_SUFFIX):
        return name[: -len(SESSION_FILE_SUFFIX)]
    return name


def read_session(
    file_path: Path, project_id: str = ""
) -> Tuple[List[Message], Optional[SessionRecord]]:
    """Parse a JSONL session file.

    The file is read in full before decoding, so an I/O error leaves nothing
    half-collected. Lines are decoded one at a time, so a torn UTF-8 sequence
    only costs the line it sits on.

    Args:
        file_path: Path to the .jsonl session file
        project_id: Name of the owning project directory

    Returns:
        Tuple of (messages, session record). The record is None when the
        file holds no valid message.

    Raises:
        OSError: If the file cannot be read

    Example:
        >>> messages, session = read_session(Path("~/.neovate/projects/-foo/abc.jsonl"))
        >>> session.message_count if session else 0
        42
    """
    session_id = session_id_from_path(file_path)
    with open(file_path, "rb") as f:
        raw = f.read()

    messages = parse_messages(iter_records(raw.splitlines()), session_id)
    return messages, SessionRecord.from_messages(session_id, project_id, messages)
