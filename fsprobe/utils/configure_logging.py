import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure fsprobe logging.

    Args:
        home: Directory holding fsprobe.log. If None, derived from FSPROBE_HOME.
        level: One of DEBUG, INFO, WARN, ERROR
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from ..api.config.get_home_dir import get_home_dir

        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "fsprobe.log"

    root_logger = logging.getLogger("fsprobe")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # watchdog debug output drowns the per-event records
    logging.getLogger("watchdog").setLevel(logging.WARNING)

    _CONFIGURED = True
