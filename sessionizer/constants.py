"""Constants used across Sessionizer.

This module defines shared constants to ensure consistency.
"""

# Parent directories (relative to home) scanned for projects
DEFAULT_ROOTS: tuple[str, ...] = ("dev", ".config")

# Process exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_SELECTION = 10  # User quit the picker without choosing

# Environment marker set by tmux inside a session
TMUX_ENV_MARKER = "TMUX"

# Characters tmux rejects in session names
SESSION_NAME_DISALLOWED = (".", ":")
SESSION_NAME_REPLACEMENT = "_"

# Environment overrides (not a config file)
ENV_ROOTS = "SESSIONIZER_ROOTS"
ENV_TMUX_BINARY = "SESSIONIZER_TMUX_BINARY"
ENV_LOG_LEVEL = "SESSIONIZER_LOG_LEVEL"
ENV_LOG_FILE = "SESSIONIZER_LOG_FILE"

DEFAULT_LOG_LEVEL = "WARNING"
