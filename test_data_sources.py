import io
import os
import subprocess
import tempfile
import unittest
from datetime import date
from unittest.mock import patch

import git_utils
from config import GlobalConfig
from context import RunContext
from data_sources.factory import get_data_source
from data_sources.local_git import LocalGitDataSource
from data_sources.stream import StreamDataSource
from errors import InvalidFilterError

LOG_TEXT = (
    "2025-09-01|alice|alice@example.com|feat: parser|aaa0001\n"
    "10\t2\tsrc/a.py\n"
)


def make_context(**overrides) -> RunContext:
    values = dict(
        repo_path=".",
        input_path=None,
        since=None,
        until=None,
        preset=None,
        author=None,
        output_format="ascii",
        detailed=False,
        output_file=None,
        publish=False,
        ttl=3600,
        server_url="http://localhost:3001",
        global_config=GlobalConfig(),
    )
    values.update(overrides)
    return RunContext(**values)


def completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestFactory(unittest.TestCase):

    def test_input_path_selects_stream_source(self):
        self.assertIsInstance(get_data_source(make_context(input_path="-")), StreamDataSource)

    def test_default_is_local_git(self):
        self.assertIsInstance(get_data_source(make_context()), LocalGitDataSource)


class TestStreamDataSource(unittest.TestCase):

    def test_reads_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "git.log")
            with open(path, "w", encoding="utf-8") as f:
                f.write(LOG_TEXT)
            source = StreamDataSource(make_context(input_path=path))
            self.assertTrue(source.validate())
            self.assertEqual(source.get_log_lines(), LOG_TEXT.splitlines())

    def test_missing_file_fails_validation(self):
        source = StreamDataSource(make_context(input_path="/nonexistent/git.log"))
        self.assertFalse(source.validate())

    def test_reads_stdin(self):
        source = StreamDataSource(make_context(input_path="-"))
        with patch("sys.stdin", io.StringIO(LOG_TEXT)):
            self.assertTrue(source.validate())
            self.assertEqual(len(source.get_log_lines()), 2)

    def test_commit_filter_from_context(self):
        source = StreamDataSource(
            make_context(input_path="-", since="2025-09-01", author="alice")
        )
        commit_filter = source.commit_filter()
        self.assertEqual(commit_filter.since, date(2025, 9, 1))
        self.assertIsNone(commit_filter.until)
        self.assertEqual(commit_filter.author.pattern, "alice")

    def test_no_commit_filter_without_options(self):
        self.assertIsNone(StreamDataSource(make_context(input_path="-")).commit_filter())

    def test_relative_date_cannot_filter_stream(self):
        source = StreamDataSource(make_context(input_path="-", until="yesterday"))
        with self.assertRaises(InvalidFilterError):
            source.commit_filter()

    def test_describe_uses_repo_name(self):
        source = StreamDataSource(make_context(input_path="-", repo_path="/work/my-project"))
        self.assertEqual(source.describe(), "my-project")


class TestLocalGitDataSource(unittest.TestCase):

    def test_build_log_args(self):
        args = git_utils.build_log_args(
            GlobalConfig(), since="2025-09-01", until="today", author="John Doe"
        )
        self.assertEqual(args[:4], ["log", "--pretty=format:%ad|%an|%ae|%s|%H", "--date=short", "--numstat"])
        self.assertIn("--since=2025-09-01", args)
        self.assertIn("--until=today", args)
        self.assertIn("--author=John Doe", args)

    def test_build_log_args_without_filters(self):
        args = git_utils.build_log_args(GlobalConfig())
        self.assertFalse(any(arg.startswith(("--since", "--until", "--author")) for arg in args))

    @patch("git_utils.subprocess.run")
    def test_get_log_lines(self, mock_run):
        mock_run.return_value = completed(stdout=LOG_TEXT)
        with tempfile.TemporaryDirectory() as tmp:
            source = LocalGitDataSource(make_context(repo_path=tmp, author="alice"))
            self.assertEqual(source.get_log_lines(), LOG_TEXT.splitlines())
        cmd = mock_run.call_args[0][0]
        self.assertEqual(cmd[:3], ["git", "-C", tmp])
        self.assertIn("--author=alice", cmd)

    @patch("git_utils.subprocess.run")
    def test_git_failure_yields_no_lines(self, mock_run):
        mock_run.return_value = completed(returncode=128, stderr="fatal: bad revision")
        source = LocalGitDataSource(make_context())
        self.assertEqual(source.get_log_lines(), [])

    @patch("git_utils.subprocess.run")
    def test_git_timeout_yields_no_lines(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=1)
        self.assertIsNone(git_utils.get_git_log(".", GlobalConfig()))

    @patch("git_utils.subprocess.run")
    def test_validate(self, mock_run):
        with tempfile.TemporaryDirectory() as tmp:
            source = LocalGitDataSource(make_context(repo_path=tmp))
            mock_run.return_value = completed(stdout="true\n")
            self.assertTrue(source.validate())
            mock_run.return_value = completed(returncode=128, stderr="fatal: not a git repository")
            self.assertFalse(source.validate())

    def test_git_already_filters(self):
        source = LocalGitDataSource(make_context(since="1 week ago", author="alice"))
        self.assertIsNone(source.commit_filter())

    def test_validate_missing_path(self):
        source = LocalGitDataSource(make_context(repo_path="/nonexistent/repo"))
        self.assertFalse(source.validate())


if __name__ == "__main__":
    unittest.main()
