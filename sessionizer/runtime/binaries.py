"""Runtime binary resolution policy.

These paths are internal platform policy; the environment can still point
at a different executable.
"""

from __future__ import annotations

import os
from typing import Mapping

from sessionizer.constants import ENV_TMUX_BINARY

_UNIX_TMUX_BINARY = "tmux"


def resolve_tmux_binary(environ: Mapping[str, str] | None = None) -> str:
    """Resolve the tmux executable.

    Args:
        environ: Environment to read the override from (defaults to os.environ)
    """
    env = os.environ if environ is None else environ
    override = (env.get(ENV_TMUX_BINARY) or "").strip()
    if override:
        return override
    return _UNIX_TMUX_BINARY
