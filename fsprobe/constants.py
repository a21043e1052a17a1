"""Shared constants for fsprobe directories and timing."""

FSPROBE_HOME_EXT = ".fsprobe"  # user-level state/config directory suffix

# Scratch tree layout: <base>/<ROOT_NAME>/<SOURCE_NAME> is watched, <base>/<ROOT_NAME> is "outside"
DEFAULT_ROOT_NAME = "testing_monitor"
DEFAULT_SOURCE_NAME = "source"
DEFAULT_LOG_NAME = "monitor.log"

# Let the OS watch registration settle before acting
PAUSE_SECS = 0.01

# Trailing notifications window after the last action
SETTLE_SECS = 1.0

DEFAULT_QUEUE_SIZE = 5

POLL_INTERVAL_SECS = 0.05

MAX_DISPLAY_WIDTH = 80
