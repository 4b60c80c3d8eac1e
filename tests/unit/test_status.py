"""Tests for change status probing."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from gitline.gateway.git.fake import FakeGitDiff
from gitline.gateway.git.real import RealGitDiff
from gitline.status import Staged, Unstaged, parse_shortstat_count, probe_change_status

SUMMARY = " 3 files changed, 10 insertions(+), 2 deletions(-)\n"


class TestParseShortstatCount:
    """Tests for parse_shortstat_count()."""

    def test_leading_count(self) -> None:
        assert parse_shortstat_count(SUMMARY) == 3

    def test_single_file(self) -> None:
        assert parse_shortstat_count(" 1 file changed, 1 insertion(+)\n") == 1

    def test_multi_digit_count(self) -> None:
        assert parse_shortstat_count("\t128 files changed") == 128

    def test_no_digits(self) -> None:
        assert parse_shortstat_count("files changed") is None

    def test_empty(self) -> None:
        assert parse_shortstat_count("") is None


class TestProbeChangeStatus:
    """Tests for probe_change_status() against FakeGitDiff."""

    def test_staged_preferred_over_unstaged(self, tmp_path: Path) -> None:
        """When both diffs report changes only the staged count is used."""
        git = FakeGitDiff(staged=" 2 files changed\n", unstaged=" 5 files changed\n")

        assert probe_change_status(git, tmp_path) == Staged(2)
        assert git.calls == [(tmp_path, True)]

    def test_unstaged_when_nothing_staged(self, tmp_path: Path) -> None:
        git = FakeGitDiff(staged=None, unstaged=" 5 files changed\n")

        assert probe_change_status(git, tmp_path) == Unstaged(5)
        assert git.calls == [(tmp_path, True), (tmp_path, False)]

    def test_clean_tree(self, tmp_path: Path) -> None:
        assert probe_change_status(FakeGitDiff(), tmp_path) is None

    def test_unparseable_staged_falls_through(self, tmp_path: Path) -> None:
        git = FakeGitDiff(staged="garbage", unstaged=" 1 file changed\n")

        assert probe_change_status(git, tmp_path) == Unstaged(1)


def _completed(returncode: int, stdout: bytes) -> MagicMock:
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    return result


class TestRealGitDiff:
    """Tests for RealGitDiff subprocess handling."""

    def test_staged_arguments(self, tmp_path: Path) -> None:
        with patch("subprocess.run", return_value=_completed(0, SUMMARY.encode())) as run:
            result = RealGitDiff().shortstat(tmp_path, staged=True)

        assert result == SUMMARY
        args, kwargs = run.call_args
        assert args[0] == ["git", "diff", "--shortstat", "--ignore-submodules", "--staged"]
        assert kwargs["cwd"] == tmp_path

    def test_unstaged_arguments(self, tmp_path: Path) -> None:
        with patch("subprocess.run", return_value=_completed(0, SUMMARY.encode())) as run:
            RealGitDiff().shortstat(tmp_path, staged=False)

        args, _ = run.call_args
        assert args[0] == ["git", "diff", "--shortstat", "--ignore-submodules"]

    def test_failure_exit_is_no_status(self, tmp_path: Path) -> None:
        with patch("subprocess.run", return_value=_completed(128, b"fatal")):
            assert RealGitDiff().shortstat(tmp_path, staged=True) is None

    def test_empty_output_is_no_status(self, tmp_path: Path) -> None:
        with patch("subprocess.run", return_value=_completed(0, b"")):
            assert RealGitDiff().shortstat(tmp_path, staged=True) is None

    def test_undecodable_output_is_no_status(self, tmp_path: Path) -> None:
        with patch("subprocess.run", return_value=_completed(0, b"\xff 3 files")):
            assert RealGitDiff().shortstat(tmp_path, staged=True) is None

    def test_missing_git_is_no_status(self, tmp_path: Path) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError("git")):
            assert RealGitDiff().shortstat(tmp_path, staged=True) is None

    def test_timeout_is_no_status(self, tmp_path: Path) -> None:
        timeout = subprocess.TimeoutExpired(cmd="git", timeout=2.0)
        with patch("subprocess.run", side_effect=timeout) as run:
            assert RealGitDiff(timeout=2.0).shortstat(tmp_path, staged=False) is None

        assert run.call_args.kwargs["timeout"] == 2.0
