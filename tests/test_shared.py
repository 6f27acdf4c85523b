"""Tests for shared.py — printing, value types, and command helpers."""

import dataclasses
import re
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from caption_digest.shared import (
    TimedSegment,
    check_dependencies,
    run_command,
    tprint,
)


# ---------------------------------------------------------------------------
# tprint
# ---------------------------------------------------------------------------

class TestTprint:
    def test_adds_timestamp(self, capsys):
        tprint("hello")
        out = capsys.readouterr().out
        assert re.match(r"^\[\d{2}:\d{2}:\d{2}\] hello\n$", out)

    def test_progress_line_has_no_timestamp(self, capsys):
        tprint("50%", end="\r")
        assert capsys.readouterr().out == "50%\r"


# ---------------------------------------------------------------------------
# TimedSegment
# ---------------------------------------------------------------------------

class TestTimedSegment:
    def test_seconds(self):
        assert TimedSegment(time="01:02:03", text="x").seconds == 3723

    def test_is_immutable(self):
        seg = TimedSegment(time="00:00:01", text="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            seg.text = "y"


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------

class TestRunCommand:
    @patch("caption_digest.shared.subprocess.run")
    def test_returns_result(self, mock_run):
        mock_run.return_value = MagicMock(stdout="ok")
        result = run_command(["echo", "ok"], "echoing", timeout=5)
        assert result.stdout == "ok"
        assert mock_run.call_args[1]["timeout"] == 5
        assert mock_run.call_args[1]["check"] is True

    @patch("caption_digest.shared.subprocess.run")
    def test_verbose_echoes_command(self, mock_run, capsys):
        mock_run.return_value = MagicMock(stdout="")
        run_command(["yt-dlp", "--version"], "version", verbose=True)
        assert "Running: yt-dlp --version" in capsys.readouterr().out

    @patch("caption_digest.shared.subprocess.run")
    def test_failure_reported_and_reraised(self, mock_run, capsys):
        mock_run.side_effect = subprocess.CalledProcessError(1, ["yt-dlp"], stderr="boom")
        with pytest.raises(subprocess.CalledProcessError):
            run_command(["yt-dlp"], "downloading captions")
        out = capsys.readouterr().out
        assert "Error: downloading captions" in out
        assert "boom" in out

    @patch("caption_digest.shared.subprocess.run")
    def test_timeout_reraised(self, mock_run, capsys):
        mock_run.side_effect = subprocess.TimeoutExpired(["yt-dlp"], 3)
        with pytest.raises(subprocess.TimeoutExpired):
            run_command(["yt-dlp"], "fetching video info", timeout=3)
        assert "timed out" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# check_dependencies
# ---------------------------------------------------------------------------

class TestCheckDependencies:
    @patch("caption_digest.shared.shutil.which", return_value="/usr/bin/yt-dlp")
    def test_found(self, mock_which):
        assert check_dependencies() == {"yt-dlp": True}

    @patch("caption_digest.shared.shutil.which", return_value=None)
    def test_missing(self, mock_which):
        assert check_dependencies() == {"yt-dlp": False}
