"""Core TUI infrastructure - terminal I/O, input handling, shortcuts."""

from mapscope.cli.core.terminal import Terminal, TerminalSize
from mapscope.cli.core.input import InputReader, InputEvent, KeyEvent, Key, MouseButton, MouseEvent
from mapscope.cli.core.shortcuts import (
    ShortcutContext,
    ShortcutDef,
    ShortcutRegistry,
    create_default_shortcuts,
)

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "InputEvent",
    "KeyEvent",
    "Key",
    "MouseButton",
    "MouseEvent",
    "ShortcutContext",
    "ShortcutDef",
    "ShortcutRegistry",
    "create_default_shortcuts",
]
