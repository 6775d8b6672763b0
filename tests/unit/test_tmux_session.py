"""Tests for the tmux create-or-reuse and attach/switch protocol."""

from __future__ import annotations

import subprocess
from types import SimpleNamespace
from typing import Any

import pytest

from sessionizer.core import tmux_session
from sessionizer.core.tmux_session import SessionLaunchError, attach_or_create_session, session_name_for_path


class _FakeTmux:
    """Stands in for subprocess.run; remembers sessions like a tmux server would."""

    def __init__(self, attach_returncode: int = 0) -> None:
        self.sessions: set[str] = set()
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, Any]] = []
        self.attach_returncode = attach_returncode

    def __call__(self, args: list[str], **kwargs: Any) -> SimpleNamespace:
        self.calls.append(list(args))
        self.kwargs.append(kwargs)
        command = args[1]
        if command == "new-session":
            name = args[args.index("-s") + 1]
            if name in self.sessions:
                return SimpleNamespace(returncode=1, stdout="", stderr=f"duplicate session: {name}")
            self.sessions.add(name)
            return SimpleNamespace(returncode=0, stdout="", stderr="")
        if self.attach_returncode and kwargs.get("check"):
            raise subprocess.CalledProcessError(self.attach_returncode, args)
        return SimpleNamespace(returncode=self.attach_returncode, stdout=None, stderr=None)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/home/me/dev/my.project:v2", "my_project_v2"),
        ("/home/me/.config/nvim", "nvim"),
        ("/home/me/.config", "_config"),
        ("/home/me/dev/plain/", "plain"),
    ],
)
def test_session_name_replaces_disallowed_characters(path: str, expected: str) -> None:
    assert session_name_for_path(path) == expected


@pytest.mark.unit
def test_attach_outside_tmux_uses_attach_session(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux()
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)

    name = attach_or_create_session("/home/me/dev/api.v1", tmux_binary="tmux", environ={})

    assert name == "api_v1"
    assert fake.calls == [
        ["tmux", "new-session", "-d", "-s", "api_v1", "-c", "/home/me/dev/api.v1"],
        ["tmux", "attach-session", "-t", "api_v1"],
    ]


@pytest.mark.unit
def test_attach_inside_tmux_uses_switch_client(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux()
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)

    attach_or_create_session("/home/me/dev/api", tmux_binary="tmux", environ={"TMUX": "/tmp/tmux-1000/default,1,0"})

    assert fake.calls[-1] == ["tmux", "switch-client", "-t", "api"]


@pytest.mark.unit
def test_empty_tmux_marker_counts_as_outside(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux()
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)

    attach_or_create_session("/home/me/dev/api", tmux_binary="tmux", environ={"TMUX": ""})

    assert fake.calls[-1] == ["tmux", "attach-session", "-t", "api"]


@pytest.mark.unit
def test_marker_read_from_process_environment_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux()
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)
    monkeypatch.setenv("TMUX", "1")

    attach_or_create_session("/home/me/dev/api", tmux_binary="/opt/bin/tmux")

    assert fake.calls[-1] == ["/opt/bin/tmux", "switch-client", "-t", "api"]


@pytest.mark.unit
def test_second_launch_reuses_existing_session_and_still_attaches(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux()
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)

    attach_or_create_session("/home/me/dev/api", tmux_binary="tmux", environ={})
    attach_or_create_session("/home/me/dev/api", tmux_binary="tmux", environ={})

    commands = [call[1] for call in fake.calls]
    assert commands == ["new-session", "attach-session", "new-session", "attach-session"]
    assert fake.sessions == {"api"}


@pytest.mark.unit
def test_attach_inherits_terminal_and_create_captures_output(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux()
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)

    attach_or_create_session("/home/me/dev/api", tmux_binary="tmux", environ={})

    create_kwargs, attach_kwargs = fake.kwargs
    assert create_kwargs["capture_output"] is True
    assert create_kwargs["check"] is False
    assert attach_kwargs == {"check": True}


@pytest.mark.unit
def test_attach_failure_raises_launch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux(attach_returncode=1)
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)

    with pytest.raises(SessionLaunchError, match="attach-session -t api failed with exit code 1"):
        attach_or_create_session("/home/me/dev/api", tmux_binary="tmux", environ={})


@pytest.mark.unit
def test_missing_tmux_binary_raises_launch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _missing(args: list[str], **_kwargs: Any) -> None:
        raise FileNotFoundError(2, "No such file or directory", args[0])

    monkeypatch.setattr(tmux_session.subprocess, "run", _missing)

    with pytest.raises(SessionLaunchError, match="cannot run no-tmux"):
        attach_or_create_session("/home/me/dev/api", tmux_binary="no-tmux", environ={})


@pytest.mark.unit
def test_ensure_session_reports_whether_it_created(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeTmux()
    monkeypatch.setattr(tmux_session.subprocess, "run", fake)

    assert tmux_session.ensure_session("api", "/home/me/dev/api", "tmux") is True
    assert tmux_session.ensure_session("api", "/home/me/dev/api", "tmux") is False
