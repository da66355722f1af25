"""Low-level terminal operations for the map viewer."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

# Mouse button reporting with SGR extended coordinates
MOUSE_ON = '\x1b[?1000h\x1b[?1006h'
MOUSE_OFF = '\x1b[?1006l\x1b[?1000l'


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O abstraction for TUI applications."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        sys.stdout.write('\x1b[0m')
        sys.stdout.flush()

    @staticmethod
    def hide_cursor() -> None:
        sys.stdout.write('\x1b[?25l')
        sys.stdout.flush()

    @staticmethod
    def show_cursor() -> None:
        sys.stdout.write('\x1b[?25h')
        sys.stdout.flush()

    @staticmethod
    def write_frame(lines: list[str]) -> None:
        """Write a full frame from the home position in one flush."""
        sys.stdout.write('\x1b[H' + '\r\n'.join(lines))
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        import termios
        import tty
        fd = sys.stdin.fileno()
        try:
            old_settings = termios.tcgetattr(fd)
        except termios.error as e:
            # termios.error is not an OSError; callers only handle OSError
            raise OSError(*e.args) from e
        try:
            tty.setraw(fd)
            logger.debug("Raw mode enabled")
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            logger.debug("Raw mode disabled")

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        sys.stdout.write('\x1b[?1049h\x1b[2J')
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write('\x1b[?1049l')
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def mouse_capture() -> Iterator[None]:
        """Report mouse button presses as input sequences."""
        sys.stdout.write(MOUSE_ON)
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write(MOUSE_OFF)
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def managed_mode(mouse: bool = True) -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input, mouse."""
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            try:
                with Terminal.raw_mode():
                    if mouse:
                        with Terminal.mouse_capture():
                            yield
                    else:
                        yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()
