"""Pick a project directory and open (or reuse) a tmux session rooted there."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sessionizer")
except PackageNotFoundError:
    # Running from a source checkout without an install.
    __version__ = "0.0.0"

__all__ = ["__version__"]
