# Append-only action log: one human-readable line per mutating request

import logging
import os
from logging.handlers import RotatingFileHandler

ACTION_LOG_PATH = os.getenv("ACTION_LOG_PATH", "hiketracker.log")
ACTION_LOG_MAX_BYTES = int(os.getenv("ACTION_LOG_MAX_BYTES", str(5 * 1024 * 1024)))
ACTION_LOG_BACKUPS = int(os.getenv("ACTION_LOG_BACKUPS", "5"))

action_logger = logging.getLogger("hiketracker.actions")


def setup_action_logger(log_path: str | None = None) -> logging.Logger:
    """Attach the rotating file handler to the action logger.

    Writes to `log_path` (defaults to ACTION_LOG_PATH). Calling it again is a
    no-op so repeated imports of the app do not duplicate lines.
    """
    path = log_path or ACTION_LOG_PATH
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)

    action_logger.setLevel(logging.INFO)
    action_logger.propagate = False

    if not action_logger.handlers:
        handler = RotatingFileHandler(
            path,
            maxBytes=ACTION_LOG_MAX_BYTES,
            backupCount=ACTION_LOG_BACKUPS,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        action_logger.addHandler(handler)

    return action_logger
