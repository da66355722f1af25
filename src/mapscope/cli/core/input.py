"""Keyboard and mouse input handling with event abstraction."""

from __future__ import annotations

import os
import re
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ESCAPE = auto()
    CTRL_C = auto()
    CTRL_D = auto()
    CTRL_R = auto()
    CTRL_U = auto()


class MouseButton(Enum):
    """Mouse buttons as reported by SGR mouse sequences."""
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    WHEEL_UP = 64
    WHEEL_DOWN = 65
    OTHER = -1

    @classmethod
    def from_code(cls, code: int) -> "MouseButton":
        # Strip modifier bits (shift=4, meta=8, ctrl=16) and motion (32)
        base = code & ~(4 | 8 | 16 | 32)
        try:
            return cls(base)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence


@dataclass(frozen=True)
class MouseEvent:
    """A mouse button event at a 0-based screen cell."""
    button: MouseButton
    column: int
    row: int
    pressed: bool = True
    raw: str = ""


InputEvent = Union[KeyEvent, MouseEvent]

# ESC [ < button ; column ; row (M = press, m = release)
_SGR_MOUSE = re.compile(r'\[<(\d+);(\d+);(\d+)([Mm])')


class InputReader:
    """
    Non-blocking keyboard and mouse input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\x03': Key.CTRL_C,
        '\x04': Key.CTRL_D,
        '\x12': Key.CTRL_R,
        '\x15': Key.CTRL_U,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """
        Read a single input event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            data = os.read(self._fd, 1024)
            self._buffer += data.decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            pass

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + 0.1

        while time.monotonic() < deadline:
            wait_time = min(deadline - time.monotonic(), 0.025)
            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    data = os.read(self._fd, 1024)
                    self._buffer += data.decode('utf-8', errors='replace')
                except (OSError, BlockingIOError):
                    pass

                # Sequence ends with letter or ~
                rest = self._buffer[1:]
                if rest and (rest[-1].isalpha() or rest[-1] == '~'):
                    return

    def _process_buffer(self) -> Optional[InputEvent]:
        """Process buffered input and return next event."""
        if not self._buffer:
            return None

        # Simple keys (including control chords)
        if self._buffer[0] in self.SIMPLE_KEYS:
            key = self.SIMPLE_KEYS[self._buffer[0]]
            raw = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(key=key, raw=raw)

        # Escape sequence
        if self._buffer[0] == '\x1b':
            return self._parse_escape_sequence()

        # Printable character
        if self._buffer[0].isprintable():
            ch = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> InputEvent:
        """Parse an escape sequence from the buffer."""
        if len(self._buffer) == 1:
            self._buffer = ""
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        rest = self._buffer[1:]

        # SS3 sequences are always exactly two characters (ESC O x)
        if rest[0] == 'O' and len(rest) >= 2:
            seq = rest[:2]
            self._buffer = rest[2:]
            return KeyEvent(key=self.SEQUENCES.get(seq), raw='\x1b' + seq)

        # Find where this sequence ends
        end_idx = 0
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                end_idx = i
                break
            if ch.isalpha() or ch == '~':
                end_idx = i + 1
                break
            end_idx = i + 1

        if end_idx == 0:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        raw = '\x1b' + seq
        self._buffer = self._buffer[1 + end_idx:]

        mouse = _SGR_MOUSE.fullmatch(seq)
        if mouse:
            code, column, row, final = mouse.groups()
            return MouseEvent(
                button=MouseButton.from_code(int(code)),
                column=int(column) - 1,
                row=int(row) - 1,
                pressed=final == 'M',
                raw=raw,
            )

        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw=raw)

        # Unknown sequence
        return KeyEvent(raw=raw)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
