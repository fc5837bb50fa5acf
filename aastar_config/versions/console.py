"""ANSI colors and progress-line helpers shared by the version scripts."""

import sys
from typing import Optional, TextIO


class Colors:
    GREEN = "\033[0;32m"
    RED = "\033[0;31m"
    YELLOW = "\033[1;33m"
    BLUE = "\033[0;34m"
    NC = "\033[0m"


def colored(text: str, color: str) -> str:
    return f"{color}{text}{Colors.NC}"


def show_progress(message: str, stream: Optional[TextIO] = None) -> None:
    """Write a transient status line (no newline), cleared by ``clear_progress``."""
    stream = stream or sys.stdout
    stream.write(message)
    stream.flush()


def clear_progress(stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write("\r\x1b[K")
    stream.flush()
