"""Create-or-reuse a tmux session for a project and hand the terminal to it."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import PurePath
from typing import Mapping

from sessionizer.constants import SESSION_NAME_DISALLOWED, SESSION_NAME_REPLACEMENT, TMUX_ENV_MARKER

logger = logging.getLogger(__name__)


class SessionLaunchError(RuntimeError):
    """Attaching (or switching) to the tmux session failed."""


def session_name_for_path(path: str) -> str:
    """Derive the tmux session name from the last path segment."""
    name = PurePath(path).name
    for char in SESSION_NAME_DISALLOWED:
        name = name.replace(char, SESSION_NAME_REPLACEMENT)
    return name


def is_inside_tmux(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return bool(env.get(TMUX_ENV_MARKER))


def ensure_session(session_name: str, path: str, tmux_binary: str) -> bool:
    """Create a detached session rooted at path.

    Failure is expected when the session already exists and is not an
    error here; any real problem shows up when attaching.

    Returns:
        True if tmux created a new session.
    """
    cmd = [tmux_binary, "new-session", "-d", "-s", session_name, "-c", path]
    logger.debug("Running %s", cmd)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as exc:
        logger.debug("new-session for %s could not start: %s", session_name, exc)
        return False
    if result.returncode != 0:
        logger.debug(
            "new-session for %s exited %d (reusing existing session): %s",
            session_name,
            result.returncode,
            (result.stderr or "").strip(),
        )
        return False
    logger.info("Created tmux session %s in %s", session_name, path)
    return True


def attach_session(session_name: str, tmux_binary: str, environ: Mapping[str, str] | None = None) -> None:
    """Attach the current terminal to the session, or switch client when already inside tmux.

    The tmux client inherits this process's stdin/stdout/stderr.
    """
    if is_inside_tmux(environ):
        cmd = [tmux_binary, "switch-client", "-t", session_name]
    else:
        cmd = [tmux_binary, "attach-session", "-t", session_name]
    logger.debug("Running %s", cmd)
    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as exc:
        raise SessionLaunchError(f"{cmd[1]} -t {session_name} failed with exit code {exc.returncode}") from exc
    except OSError as exc:
        raise SessionLaunchError(f"cannot run {tmux_binary}: {exc}") from exc


def attach_or_create_session(
    path: str,
    *,
    tmux_binary: str,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Ensure a session for path exists and attach to it.

    Returns:
        The session name used.

    Raises:
        SessionLaunchError: If the attach/switch step fails.
    """
    session_name = session_name_for_path(path)
    ensure_session(session_name, path, tmux_binary)
    attach_session(session_name, tmux_binary, environ)
    return session_name
