"""Console helpers: input normalisation, single-key reads, screen clearing."""

from __future__ import annotations

import os
import subprocess
import sys

_STRIP_CHARS = " \r\n"


def strip_and_lower(text: str) -> str:
    """Remove leading and trailing spaces, CR and LF, then lowercase."""
    return text.strip(_STRIP_CHARS).lower()


def getch() -> str:
    """Read a single character from standard input without waiting for Enter.

    Returns an empty string at end of input.
    """
    stream = sys.stdin
    if os.name == "nt":
        import msvcrt

        return msvcrt.getwch()

    try:
        fd = stream.fileno()
        is_tty = os.isatty(fd)
    except (AttributeError, OSError, ValueError):
        is_tty = False

    if not is_tty:
        return stream.read(1)

    import termios

    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    try:
        termios.tcsetattr(fd, termios.TCSANOW, new)
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def clear_console() -> None:
    """Clear the terminal window."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()