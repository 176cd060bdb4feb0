"""Tests for input source selection and the clipboard / stdin / issue resolvers."""

from __future__ import annotations

import io
import json
import subprocess

import pytest

from branchdesc.exceptions import (
    ClipboardError,
    InvalidIssueReferenceError,
    IssueTrackerError,
    StdinError,
    UsageError,
)
from branchdesc.models.inputs import InputRequest, InputSource
from branchdesc.operations import inputs


def _completed(args, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# InputRequest.from_options
# ---------------------------------------------------------------------------

class TestInputRequest:
    def test_no_options_prompts(self):
        assert InputRequest.from_options().source is InputSource.PROMPT

    def test_literal_text(self):
        request = InputRequest.from_options(text="Adds login")
        assert request.source is InputSource.ARGUMENT
        assert request.text == "Adds login"

    def test_empty_literal_text_is_still_argument(self):
        assert InputRequest.from_options(text="").source is InputSource.ARGUMENT

    @pytest.mark.parametrize(
        "kwargs, source",
        [
            ({"clipboard": True}, InputSource.CLIPBOARD),
            ({"stdin": True}, InputSource.STDIN),
            ({"issue": "42"}, InputSource.ISSUE),
        ],
    )
    def test_single_source(self, kwargs, source):
        assert InputRequest.from_options(**kwargs).source is source

    def test_issue_reference_trimmed(self):
        assert InputRequest.from_options(issue=" 42 ").issue_ref == "42"

    def test_blank_issue(self):
        with pytest.raises(UsageError, match="--issue requires"):
            InputRequest.from_options(issue="  ")

    def test_multiple_sources(self):
        with pytest.raises(UsageError, match=r"Only one input source .*--clipboard, --stdin"):
            InputRequest.from_options(clipboard=True, stdin=True)

    def test_text_with_source(self):
        with pytest.raises(UsageError, match="cannot be combined with --clipboard"):
            InputRequest.from_options(text="x", clipboard=True)

    def test_ai_with_text(self):
        with pytest.raises(UsageError, match="AI summarization cannot be used with direct text input"):
            InputRequest.from_options(text="x", ai_summarize=True)

    def test_ai_without_source(self):
        with pytest.raises(UsageError, match="--ai-summarize needs an input source"):
            InputRequest.from_options(ai_summarize=True)

    @pytest.mark.parametrize("kwargs", [{"clipboard": True}, {"stdin": True}, {"issue": "7"}])
    def test_ai_with_summarizable_source(self, kwargs):
        request = InputRequest.from_options(ai_summarize=True, ai_timeout=30, **kwargs)
        assert request.ai_summarize
        assert request.ai_timeout == 30

    def test_timeout_left_to_config_when_not_given(self):
        request = InputRequest.from_options(stdin=True, ai_summarize=True)
        assert request.ai_timeout is None

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_non_positive_timeout(self, timeout):
        with pytest.raises(UsageError, match="--ai-timeout"):
            InputRequest.from_options(stdin=True, ai_summarize=True, ai_timeout=timeout)


# ---------------------------------------------------------------------------
# Clipboard
# ---------------------------------------------------------------------------

class TestReadClipboard:
    def test_macos(self, monkeypatch):
        calls = []
        monkeypatch.setattr(inputs.shutil, "which", lambda name: f"/usr/bin/{name}")

        def fake_run(args, **kwargs):
            calls.append(args)
            return _completed(args, stdout="  copied text \n")

        monkeypatch.setattr(inputs.subprocess, "run", fake_run)

        assert inputs.read_clipboard("darwin") == "copied text"
        assert calls == [["pbpaste"]]

    def test_windows(self, monkeypatch):
        calls = []
        monkeypatch.setattr(inputs.shutil, "which", lambda name: name)
        monkeypatch.setattr(
            inputs.subprocess, "run", lambda args, **kw: calls.append(args) or _completed(args, stdout="x")
        )

        inputs.read_clipboard("win32")

        assert calls[0][0] == "powershell"
        assert "Get-Clipboard" in calls[0]

    def test_linux_prefers_first_available_tool(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            inputs.shutil, "which", lambda name: "/usr/bin/xclip" if name == "xclip" else None
        )
        monkeypatch.setattr(
            inputs.subprocess, "run", lambda args, **kw: calls.append(args) or _completed(args, stdout="x")
        )

        inputs.read_clipboard("linux")

        assert calls == [["xclip", "-selection", "clipboard", "-o"]]

    def test_no_tool(self, monkeypatch):
        monkeypatch.setattr(inputs.shutil, "which", lambda name: None)
        with pytest.raises(ClipboardError, match="no clipboard tool found"):
            inputs.read_clipboard("linux")

    def test_tool_failure(self, monkeypatch):
        monkeypatch.setattr(inputs.shutil, "which", lambda name: name)
        monkeypatch.setattr(
            inputs.subprocess,
            "run",
            lambda args, **kw: _completed(args, returncode=1, stderr="Nothing is copied"),
        )
        with pytest.raises(ClipboardError, match="Nothing is copied"):
            inputs.read_clipboard("linux")

    def test_tool_cannot_start(self, monkeypatch):
        monkeypatch.setattr(inputs.shutil, "which", lambda name: name)

        def fake_run(args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(inputs.subprocess, "run", fake_run)
        with pytest.raises(ClipboardError, match="denied"):
            inputs.read_clipboard("darwin")


# ---------------------------------------------------------------------------
# Stdin
# ---------------------------------------------------------------------------

class TestReadStdin:
    def test_reads_and_trims(self):
        assert inputs.read_stdin(io.StringIO("\n piped text \n\n")) == "piped text"

    def test_empty(self):
        assert inputs.read_stdin(io.StringIO("")) == ""

    def test_tty_rejected(self):
        with pytest.raises(StdinError, match="No input detected on stdin"):
            inputs.read_stdin(_TtyStream("ignored"))


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------

class TestFetchIssue:
    def test_success(self, monkeypatch):
        calls = []

        def fake_run(args, **kwargs):
            calls.append((args, kwargs))
            payload = {"title": "Fix login", "description": "Users cannot log in."}
            return _completed(args, stdout=json.dumps(payload))

        monkeypatch.setattr(inputs.subprocess, "run", fake_run)

        text = inputs.fetch_issue("https://gitlab.com/g/p/-/issues/12", timeout=5)

        assert text == "Fix login\n\nUsers cannot log in."
        args, kwargs = calls[0]
        assert args == ["glab", "issue", "view", "12", "--output", "json"]
        assert kwargs["timeout"] == 5

    def test_invalid_reference_does_not_run_glab(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise AssertionError("glab should not run")

        monkeypatch.setattr(inputs.subprocess, "run", fake_run)
        with pytest.raises(InvalidIssueReferenceError):
            inputs.fetch_issue("https://github.com/o/r/issues/1")

    def test_glab_missing(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise FileNotFoundError("glab")

        monkeypatch.setattr(inputs.subprocess, "run", fake_run)
        with pytest.raises(IssueTrackerError, match="Make sure glab is installed"):
            inputs.fetch_issue("1")

    def test_glab_fails(self, monkeypatch):
        monkeypatch.setattr(
            inputs.subprocess,
            "run",
            lambda args, **kw: _completed(args, returncode=1, stderr="404 Not Found"),
        )
        with pytest.raises(IssueTrackerError, match="glab command failed: 404 Not Found"):
            inputs.fetch_issue("1")

    def test_glab_timeout(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])

        monkeypatch.setattr(inputs.subprocess, "run", fake_run)
        with pytest.raises(IssueTrackerError, match="timed out after 3s"):
            inputs.fetch_issue("1", timeout=3)

    def test_bad_json(self, monkeypatch):
        monkeypatch.setattr(inputs.subprocess, "run", lambda args, **kw: _completed(args, stdout="{"))
        with pytest.raises(IssueTrackerError, match="Failed to parse JSON"):
            inputs.fetch_issue("1")
