"""Runtime-only policy modules (environment overrides only)."""

from sessionizer.runtime.binaries import resolve_tmux_binary

__all__ = ["resolve_tmux_binary"]
