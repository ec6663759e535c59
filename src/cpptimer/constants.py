"""Constants for cpptimer."""

# Persisted state and configuration, both in the workspace root
STORAGE_FILE = ".cpp-timer.json"
CONFIG_FILE = ".cpp-timer.toml"

# Status refresh and filesystem polling (seconds)
REFRESH_INTERVAL = 1.0
POLL_INTERVAL = 1.0

BUILD_TIMEOUT = 300  # 5 minutes for a build command
BUILD_KEYWORD = "build"

STOPPED_MARKER = " (stopped)"
DONE_MARKER = " (done)"
