"""Project discovery functions for Neovate Wrapped.

This module provides functions to locate and list Neovate projects:
- get_neovate_dir(): Get the ~/.neovate directory path
- get_projects_dir(): Get the ~/.neovate/projects directory path
- check_data_exists(): Whether the data root can be listed
- list_projects(): Discover all readable project directories
- list_session_files(): Session log files of one project
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from .constants import NEOVATE_DIR_NAME, PROJECTS_DIR_NAME, SESSION_FILE_SUFFIX
from .models import Project

logger = logging.getLogger(__name__)


class DataDirectoryError(OSError):
    """Raised when the data root itself cannot be listed."""


def get_neovate_dir() -> Path:
    """Get the Neovate data directory.

    Returns:
        Path to ~/.neovate directory
    """
    return Path.home() / NEOVATE_DIR_NAME


def get_projects_dir() -> Path:
    """Get the directory where per-project session logs are stored.

    Returns:
        Path to ~/.neovate/projects directory
    """
    return get_neovate_dir() / PROJECTS_DIR_NAME


def _list_dir(path: Path) -> List[str]:
    return sorted(os.listdir(path))


def check_data_exists(root: Optional[Path] = None) -> bool:
    """Check whether the data root exists and can be listed."""
    try:
        _list_dir(root or get_projects_dir())
    except OSError:
        return False
    return True


def list_projects(root: Optional[Path] = None) -> List[Project]:
    """List every project directory under the data root.

    A child counts as a project only if it can itself be listed as a
    directory. Anything else (plain files, permission errors, entries that
    vanish mid-scan) is skipped.

    Args:
        root: Data root (default: ~/.neovate/projects)

    Returns:
        Projects sorted by directory name

    Raises:
        DataDirectoryError: If the root itself cannot be listed

    Example:
        >>> for p in list_projects()[:3]:
        ...     print(p.project_id)
    """
    root = root or get_projects_dir()
    try:
        names = _list_dir(root)
    except OSError as e:
        raise DataDirectoryError(f"Failed to read data directory {root}: {e}") from e

    projects = []
    for name in names:
        project_path = root / name
        try:
            _list_dir(project_path)
        except OSError as e:
            logger.debug("Skipping %s: %s", project_path, e)
            continue
        projects.append(Project(project_id=name, path=project_path))
    return projects


def list_session_files(project: Project) -> List[Path]:
    """List the session log files of a project.

    Only names ending in .jsonl that contain no path separator qualify.

    Raises:
        OSError: If the project directory cannot be listed
    """
    return [
        project.path / name
        for name in _list_dir(project.path)
        if name.endswith(SESSION_FILE_SUFFIX) and "/" not in name and os.sep not in name
    ]
