"""Tests for the tmux and direct launchers."""

import io
import subprocess
import sys

import pytest

from mssh.core.launcher import DirectLauncher, TmuxLauncher, load_launcher
from mssh.core.launcher.direct import copy_stream
from mssh.errors import LaunchWarning


def test_load_launcher() -> None:
    assert isinstance(load_launcher(True), TmuxLauncher)
    assert isinstance(load_launcher(False), DirectLauncher)
    assert TmuxLauncher.multiplexed and not DirectLauncher.multiplexed


def test_tmux_joins_command_into_window(monkeypatch) -> None:
    started = []

    class FakePopen:
        def __init__(self, args, **kwargs):
            started.append(args)

        def wait(self):
            raise AssertionError("tmux windows are not waited on")

    monkeypatch.setattr(subprocess, "Popen", FakePopen)

    TmuxLauncher().launch(["ssh", "-t", "bastion", "ssh web1"])

    assert started == [["tmux", "new-window", "ssh -t bastion ssh web1"]]


def test_tmux_start_failure(monkeypatch) -> None:
    def broken(*args, **kwargs):
        raise FileNotFoundError("tmux")

    monkeypatch.setattr(subprocess, "Popen", broken)

    with pytest.raises(LaunchWarning, match="tmux"):
        TmuxLauncher().launch(["ssh", "-t", "web1"])


def test_direct_success_returns_exit_status() -> None:
    out, err = io.BytesIO(), io.BytesIO()

    returncode = DirectLauncher(stdout=out, stderr=err).launch([sys.executable, "-c", "print('hi')"])

    assert returncode == 0


def test_direct_nonzero_exit() -> None:
    launcher = DirectLauncher(stdout=io.BytesIO(), stderr=io.BytesIO())

    with pytest.raises(LaunchWarning, match="status 3"):
        launcher.launch([sys.executable, "-c", "import sys; sys.exit(3)"])


def test_direct_missing_program() -> None:
    launcher = DirectLauncher(stdout=io.BytesIO(), stderr=io.BytesIO())

    with pytest.raises(LaunchWarning):
        launcher.launch(["/nonexistent/mssh-test-binary", "web1"])


def test_copy_stream_to_binary_target() -> None:
    target = io.BytesIO()

    copy_stream(io.BytesIO(b"line one\nline two\n"), target)

    assert target.getvalue() == b"line one\nline two\n"


def test_copy_stream_prefers_buffer() -> None:
    target = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")

    copy_stream(io.BytesIO(b"abc"), target)

    assert target.buffer.getvalue() == b"abc"


def test_copy_stream_stops_on_closed_target() -> None:
    target = io.BytesIO()
    target.close()

    copy_stream(io.BytesIO(b"abc"), target)
