"""Log collection for Neovate Wrapped.

This module walks the data root and turns session files into records:
- collect_projects(): All readable project directories
- collect_sessions(): Derived session records (optionally by year)
- collect_messages(): Message records (optionally by year)
- collect_corpus(): One scan producing every view at once

Only an unreadable data root is fatal. A project directory, session file, or
line that cannot be read is skipped and the scan carries on.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple

from .filters import filter_messages_by_year, filter_sessions_by_year
from .models import Corpus, Message, Project, SessionRecord
from .parser import read_session
from .projects import list_projects, list_session_files

logger = logging.getLogger(__name__)

ProjectScan = Tuple[List[Message], List[SessionRecord]]


def scan_project(project: Project) -> ProjectScan:
    """Read every session file of one project.

    Returns:
        Tuple of (messages, sessions) for the project; both empty if the
        project directory cannot be listed
    """
    messages: List[Message] = []
    sessions: List[SessionRecord] = []

    try:
        session_files = list_session_files(project)
    except OSError as e:
        logger.debug("Skipping project %s: %s", project.project_id, e)
        return messages, sessions

    for session_file in session_files:
        try:
            file_messages, session = read_session(session_file, project.project_id)
        except OSError as e:
            logger.debug("Skipping session file %s: %s", session_file, e)
            continue
        messages.extend(file_messages)
        if session is not None:
            sessions.append(session)

    return messages, sessions


def collect_corpus(
    root: Optional[Path] = None,
    year: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> Corpus:
    """Scan the data root once and build all collector views.

    Args:
        root: Data root (default: ~/.neovate/projects)
        year: Year for the filtered views (None keeps everything)
        max_workers: Scan projects on a thread pool of this size when > 1

    Returns:
        Corpus with projects, all/year sessions, and all/year messages

    Raises:
        DataDirectoryError: If the data root cannot be listed
    """
    projects = list_projects(root)

    if max_workers and max_workers > 1 and len(projects) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            scans = list(executor.map(scan_project, projects))
    else:
        scans = [scan_project(p) for p in projects]

    all_messages: List[Message] = []
    all_sessions: List[SessionRecord] = []
    for messages, sessions in scans:
        all_messages.extend(messages)
        all_sessions.extend(sessions)

    logger.debug(
        "Collected %d projects, %d sessions, %d messages",
        len(projects),
        len(all_sessions),
        len(all_messages),
    )

    return Corpus(
        projects=projects,
        all_sessions=all_sessions,
        sessions=filter_sessions_by_year(all_sessions, year),
        all_messages=all_messages,
        messages=filter_messages_by_year(all_messages, year),
    )


def collect_projects(root: Optional[Path] = None) -> List[Project]:
    """List all readable project directories."""
    return list_projects(root)


def collect_sessions(root: Optional[Path] = None, year: Optional[int] = None) -> List[SessionRecord]:
    """Collect session records, keeping those that started in ``year``."""
    return collect_corpus(root, year).sessions


def collect_messages(root: Optional[Path] = None, year: Optional[int] = None) -> List[Message]:
    """Collect message records timestamped in ``year``."""
    return collect_corpus(root, year).messages
