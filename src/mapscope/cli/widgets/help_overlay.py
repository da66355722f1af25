"""Help box drawn over the centre of the map."""

from __future__ import annotations

from typing import Optional

from mapscope.cli.core.ansi_text import truncate_and_pad, visible_len
from mapscope.cli.core.shortcuts import ShortcutContext, ShortcutRegistry, create_default_shortcuts
from mapscope.cli.widgets.base import BaseWidget, Rect

BORDER_STYLE = "\x1b[33m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"

MOUSE_HELP = [
    "Mouse Controls:",
    "  Left Click  - Draw on Map",
    "  Right Click - Erase from Map",
]


class HelpOverlayWidget(BaseWidget):
    """Bordered help box, sized to 60% of the screen when room allows."""

    def __init__(self, shortcuts: Optional[ShortcutRegistry] = None, percent: int = 60) -> None:
        super().__init__()
        self._shortcuts = shortcuts or create_default_shortcuts()
        self.percent = percent

    def content(self) -> list[str]:
        """Help text lines, headings in bold."""
        lines = [f"{BOLD}Help Menu{RESET}", ""]
        body = self._shortcuts.generate_help_text(ShortcutContext.MAP)
        body += [""] + MOUSE_HELP
        for line in body:
            if line.endswith(":"):
                line = f"{BOLD}{line}{RESET}"
            lines.append(line)
        return lines

    def render(self, bounds: Rect) -> list[str]:
        """Render the box itself (bounds.width x bounds.height)."""
        width, height = bounds.width, bounds.height
        if width < 4 or height < 3:
            return []
        inner = width - 4
        title = f"{'─ Help ':─<{width - 2}}"[:width - 2]
        lines = [f"{BORDER_STYLE}┌{title}┐{RESET}"]
        content = self.content()
        for i in range(height - 2):
            text = content[i] if i < len(content) else ""
            lines.append(f"{BORDER_STYLE}│{RESET} {truncate_and_pad(text, inner)} {BORDER_STYLE}│{RESET}")
        lines.append(f"{BORDER_STYLE}└{'─' * (width - 2)}┘{RESET}")
        return lines

    def box_bounds(self, width: int, height: int) -> Rect:
        """Centred box for a screen size, grown to fit the text if possible."""
        content = self.content()
        content_width = max(visible_len(line) for line in content) + 4
        box_w = min(width, max(width * self.percent // 100, content_width))
        box_h = min(height, max(height * self.percent // 100, len(content) + 2))
        return Rect((width - box_w) // 2, (height - box_h) // 2, box_w, box_h)

    def overlay(self, lines: list[str], width: int, height: int) -> list[str]:
        """Draw the box over plain-text frame rows, keeping each row's width."""
        if not self.visible:
            return lines
        box = self.box_bounds(width, height)
        box_lines = self.render(box)
        result = list(lines)
        for i, box_line in enumerate(box_lines):
            y = box.y + i
            if y >= len(result):
                break
            row = result[y]
            result[y] = row[:box.x] + box_line + row[box.x + box.width:]
        return result
