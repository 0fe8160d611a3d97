"""
debug_logger.py
---------------
Console logger with category filtering, colored tags and source detection.

Used by every subsystem instead of print(). Messages are dropped unless
their category is enabled in LoggerConfig and their level is within
LoggerConfig.LOG_LEVEL.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories emit messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Engine
        "system": True,
        "loading": False,
        "display": True,
        "render": False,
        "input": False,

        # Flow
        "scene": True,
        "intro": True,
        "timing": False,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; every public method takes a message and a category."""

    LINE_LENGTH = 59

    TAG_COLORS = {
        "INIT": Colors.WHITE,
        "SYSTEM": Colors.MAGENTA,
        "STATE": Colors.CYAN,
        "ACTION": Colors.GREEN,
        "TRACE": Colors.BLUE,
        "WARN": Colors.YELLOW,
    }

    LEVELS = ("NONE", "ERROR", "WARN", "INFO", "VERBOSE")

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """Return True if a message of this category and level would print."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False

        levels = DebugLogger.LEVELS
        wanted = levels.index(level) if level in levels else 3
        limit = levels.index(LoggerConfig.LOG_LEVEL) if LoggerConfig.LOG_LEVEL in levels else 3
        return wanted <= limit

    # ===========================================================
    # Caller Detection
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return local_vars["self"].__class__.__name__
        if "cls" in local_vars and isinstance(local_vars["cls"], type):
            return local_vars["cls"].__name__

        # Module-level call: snake_case file name -> PascalCase
        filename = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(part.capitalize() for part in filename[:-3].split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _log(tag: str, message: str, category: str, level: str):
        if not DebugLogger.enabled(category, level):
            return

        color = DebugLogger.TAG_COLORS.get(tag, Colors.RESET)
        timestamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        print(f"{color}[{timestamp}] [{source}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Initialization log. Empty message prints a blank line."""
        if not msg.strip():
            print()
            return
        DebugLogger._log("INIT", msg, category, "INFO")

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category, "INFO")

    @staticmethod
    def state(msg: str, category: str = "system"):
        """State change log."""
        DebugLogger._log("STATE", msg, category, "INFO")

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category, "INFO")

    @staticmethod
    def trace(msg: str, category: str = "timing"):
        """Per-frame detail, only at VERBOSE."""
        DebugLogger._log("TRACE", msg, category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category, "WARN")

    # ===========================================================
    # Section / Init Report Formatting
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a boxed section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted '> Module ...... [OK]' startup line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        status_color = {
            "OK": Colors.GREEN,
            "LOADING": Colors.CYAN,
            "FAIL": Colors.RED,
        }.get(status.upper(), Colors.WHITE)

        prefix = f"> {module}"
        status_str = f"[{status}]"
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - len(status_str) - 2, 1)
        print(f"{Colors.WHITE}{prefix} {'.' * dots} {status_color}{status_str}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print an indented bullet under the last init entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        indent = " " * (level * 4)
        print(f"{indent}• {Colors.WHITE}{detail}{Colors.RESET}")
