"""Tests for project discovery, collection, and year filtering."""

from pathlib import Path
from unittest.mock import patch

import pytest

from conftest import make_message, message_record, write_session
from neovate_wrapped.collector import (
    collect_corpus,
    collect_messages,
    collect_projects,
    collect_sessions,
    scan_project,
)
from neovate_wrapped.filters import filter_messages_by_year, filter_sessions_by_year, in_year
from neovate_wrapped.models import Project, SessionRecord
from neovate_wrapped.projects import (
    DataDirectoryError,
    check_data_exists,
    get_neovate_dir,
    get_projects_dir,
    list_projects,
    list_session_files,
)
from neovate_wrapped.utils import parse_timestamp


class TestPaths:
    """Test default data locations."""

    def test_default_dirs(self):
        with patch("neovate_wrapped.projects.Path.home", return_value=Path("/home/alice")):
            assert get_neovate_dir() == Path("/home/alice/.neovate")
            assert get_projects_dir() == Path("/home/alice/.neovate/projects")

    def test_check_data_exists(self, data_root):
        assert check_data_exists(data_root) is True
        assert check_data_exists(data_root / "missing") is False


class TestListProjects:
    """Test project discovery."""

    def test_only_listable_directories_are_projects(self, data_root):
        (data_root / "-Users-test-one").mkdir()
        (data_root / "-Users-test-two").mkdir()
        (data_root / "stray-file.txt").write_text("not a project")
        (data_root / "dangling").symlink_to(data_root / "nowhere")

        projects = list_projects(data_root)

        assert [p.project_id for p in projects] == ["-Users-test-one", "-Users-test-two"]
        assert projects[0].path == data_root / "-Users-test-one"

    def test_missing_root_is_fatal(self, tmp_path):
        with pytest.raises(DataDirectoryError):
            list_projects(tmp_path / "missing")

    def test_root_that_is_a_file_is_fatal(self, tmp_path):
        not_a_dir = tmp_path / "projects"
        not_a_dir.write_text("")
        with pytest.raises(DataDirectoryError):
            collect_corpus(not_a_dir)

    def test_data_directory_error_is_os_error(self):
        assert issubclass(DataDirectoryError, OSError)

    def test_empty_root(self, data_root):
        assert list_projects(data_root) == []
        assert collect_projects(data_root) == []


class TestListSessionFiles:
    """Test session file selection."""

    def test_only_jsonl_files(self, data_root):
        project_dir = data_root / "-Users-test-project"
        write_session(project_dir, "b.jsonl", [])
        write_session(project_dir, "a.jsonl", [])
        write_session(project_dir, "notes.txt", [])
        write_session(project_dir, "a.jsonl.bak", [])

        files = list_session_files(Project("-Users-test-project", project_dir))

        assert [f.name for f in files] == ["a.jsonl", "b.jsonl"]


class TestScanProject:
    """Test per-project failure boundaries."""

    def test_unreadable_file_is_skipped(self, data_root):
        project_dir = data_root / "-Users-test-project"
        write_session(project_dir, "good.jsonl", [message_record("2025-04-01T10:00:00")])
        (project_dir / "binary.jsonl").write_bytes(b"\xff\xfe\x00garbage")
        (project_dir / "directory.jsonl").mkdir()

        messages, sessions = scan_project(Project("-Users-test-project", project_dir))

        assert len(messages) == 1
        assert [s.session_id for s in sessions] == ["good"]

    def test_vanished_project_is_skipped(self, data_root):
        assert scan_project(Project("gone", data_root / "gone")) == ([], [])

    def test_invalid_utf8_line_keeps_session(self, data_root):
        project_dir = data_root / "-Users-test-project"
        session_file = write_session(
            project_dir,
            "torn.jsonl",
            [message_record(f"2025-04-0{d}T10:00:00") for d in (1, 2, 3)],
        )
        with open(session_file, "ab") as f:
            f.write(b'{"type": "message", "role": "user", "content": "\xe2\x82"}\n')

        corpus = collect_corpus(data_root, 2025)

        assert len(corpus.messages) == 3
        assert [s.session_id for s in corpus.sessions] == ["torn"]
        assert corpus.sessions[0].message_count == 3


class TestYearFilter:
    """Test year predicates."""

    def test_in_year(self):
        ts = parse_timestamp("2025-06-15T12:00:00")
        assert in_year(ts, 2025)
        assert not in_year(ts, 2024)
        assert in_year(ts, None)

    def test_filter_messages_by_year(self):
        messages = [
            make_message("2024-12-31T23:59:00"),
            make_message("2025-01-01T00:00:00"),
            make_message("2025-12-31T23:59:59"),
            make_message("2026-01-01T00:00:01"),
        ]
        kept = filter_messages_by_year(messages, 2025)
        assert [m.timestamp.year for m in kept] == [2025, 2025]
        assert filter_messages_by_year(messages, None) == messages

    def test_sessions_belong_to_their_first_year(self):
        def session(session_id, first, last):
            return SessionRecord(
                session_id=session_id,
                project_id="p",
                first_message_time=parse_timestamp(first),
                last_message_time=parse_timestamp(last),
                message_count=2,
            )

        sessions = [
            session("1", "2024-06-15T10:00:00", "2024-06-15T11:00:00"),
            session("2", "2025-01-15T10:00:00", "2025-01-15T11:00:00"),
            session("3", "2025-12-31T22:00:00", "2026-01-01T02:00:00"),
        ]

        assert [s.session_id for s in filter_sessions_by_year(sessions, 2024)] == ["1"]
        assert [s.session_id for s in filter_sessions_by_year(sessions, 2025)] == ["2", "3"]
        assert filter_sessions_by_year(sessions, 2026) == []
        assert filter_sessions_by_year([], 2025) == []


class TestCollectCorpus:
    """Test the collector views."""

    @pytest.fixture
    def multi_year_root(self, data_root):
        write_session(
            data_root / "-Users-test-alpha",
            "boundary.jsonl",
            [
                message_record("2024-12-31T22:00:00"),
                message_record("2025-01-01T01:00:00", role="assistant"),
            ],
        )
        write_session(
            data_root / "-Users-test-alpha",
            "this-year.jsonl",
            [message_record("2025-05-05T10:00:00")],
        )
        write_session(
            data_root / "-Users-test-beta",
            "old.jsonl",
            [message_record("2023-03-03T10:00:00"), {"type": "system"}],
        )
        return data_root

    def test_views(self, multi_year_root):
        corpus = collect_corpus(multi_year_root, 2025)

        assert [p.project_id for p in corpus.projects] == ["-Users-test-alpha", "-Users-test-beta"]
        assert len(corpus.all_sessions) == 3
        assert [s.session_id for s in corpus.sessions] == ["this-year"]
        assert len(corpus.all_messages) == 4
        assert len(corpus.messages) == 2

    def test_without_year(self, multi_year_root):
        corpus = collect_corpus(multi_year_root)
        assert corpus.sessions == corpus.all_sessions
        assert corpus.messages == corpus.all_messages

    def test_independent_views(self, multi_year_root):
        assert len(collect_messages(multi_year_root, 2025)) == 2
        assert len(collect_messages(multi_year_root)) == 4
        assert [s.session_id for s in collect_sessions(multi_year_root, 2024)] == ["boundary"]
        assert len(collect_projects(multi_year_root)) == 2

    def test_thread_pool_matches_sequential(self, multi_year_root):
        sequential = collect_corpus(multi_year_root, 2025)
        parallel = collect_corpus(multi_year_root, 2025, max_workers=4)

        assert parallel.projects == sequential.projects
        assert parallel.all_sessions == sequential.all_sessions
        assert parallel.messages == sequential.messages

    def test_scenario_corpus(self, scenario_root):
        corpus = collect_corpus(scenario_root, 2025)

        assert len(corpus.projects) == 2
        assert len(corpus.sessions) == 1
        assert len(corpus.messages) == 3
