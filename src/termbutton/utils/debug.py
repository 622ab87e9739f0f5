"""Debug logging utilities."""

import os
import sys
import time

DEBUG_ENV_VAR = "TERMBUTTON_DEBUG"
LOG_DIR_ENV_VAR = "TERMBUTTON_LOG_DIR"


def get_logs_dir() -> str:
    """Get the directory debug logs are written to."""
    logs_dir = os.getenv(LOG_DIR_ENV_VAR)
    if logs_dir:
        return logs_dir
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "logs")


def debug_log(message: str, component: str = "") -> None:
    """Log debug messages to a per-process log file if debug mode is enabled.

    Args:
        message: Debug message to log
        component: Optional component name used as a message prefix
    """
    if not os.getenv(DEBUG_ENV_VAR):
        return

    logs_dir = get_logs_dir()
    log_file = os.path.join(logs_dir, f"termbutton_debug_{os.getpid()}.log")
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    prefix = f"[{component}] " if component else ""
    log_message = f"[{timestamp}] {prefix}{message}\n"

    try:
        os.makedirs(logs_dir, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(
            f"DEBUG (couldn't write to {log_file}): {prefix}{message}",
            file=sys.stderr,
        )
