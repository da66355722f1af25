"""Centralized keyboard shortcut registry.

Every binding the viewer understands is declared here once, with its keys,
description and handler name, so the key dispatch and the help overlay can
never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from mapscope.cli.core.input import Key, KeyEvent


class ShortcutContext(Enum):
    """Context in which a shortcut is active."""
    GLOBAL = auto()    # Always available
    MAP = auto()       # While the map canvas has focus


@dataclass
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        id: Unique identifier for the shortcut
        keys: List of keys/chars that trigger this shortcut
        description: Description for the help overlay
        context: Context(s) where this shortcut is active
        handler: Name of the handler method to call
        category: Category for grouping in help
    """
    id: str
    keys: list[str | Key]
    description: str
    context: list[ShortcutContext] = field(default_factory=lambda: [ShortcutContext.GLOBAL])
    handler: str = ""
    category: str = "General"

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        return ", ".join(
            _key_to_display(key) if isinstance(key, Key) else key
            for key in self.keys
        )


def _key_to_display(key: Key) -> str:
    """Convert a Key enum to display string."""
    display_map = {
        Key.UP: "Up",
        Key.DOWN: "Down",
        Key.LEFT: "Left",
        Key.RIGHT: "Right",
        Key.ESCAPE: "Esc",
        Key.CTRL_C: "Ctrl+c",
        Key.CTRL_D: "Ctrl+d",
        Key.CTRL_R: "Ctrl+r",
        Key.CTRL_U: "Ctrl+u",
    }
    return display_map.get(key, key.name)


class ShortcutRegistry:
    """Central registry for all keyboard shortcuts.

    Example:
        registry = create_default_shortcuts()
        shortcut = registry.match(event, ShortcutContext.MAP)
        if shortcut:
            getattr(handler, shortcut.handler)()
    """

    def __init__(self) -> None:
        self._shortcuts: dict[str, ShortcutDef] = {}
        self._by_context: dict[ShortcutContext, list[ShortcutDef]] = {
            ctx: [] for ctx in ShortcutContext
        }

    def register(self, shortcut: ShortcutDef) -> None:
        """Register a shortcut definition."""
        if shortcut.id in self._shortcuts:
            raise ValueError(f"duplicate shortcut id {shortcut.id!r}")
        self._shortcuts[shortcut.id] = shortcut
        for ctx in shortcut.context:
            self._by_context[ctx].append(shortcut)

    def register_many(self, shortcuts: list[ShortcutDef]) -> None:
        for shortcut in shortcuts:
            self.register(shortcut)

    def match(self, event: KeyEvent, *contexts: ShortcutContext) -> Optional[ShortcutDef]:
        """Find a shortcut matching the event in the given contexts.

        GLOBAL shortcuts are always searched, after the named contexts.
        """
        search = [ctx for ctx in contexts if ctx != ShortcutContext.GLOBAL]
        search.append(ShortcutContext.GLOBAL)
        for ctx in search:
            for shortcut in self._by_context[ctx]:
                if shortcut.matches(event):
                    return shortcut
        return None

    def get_for_context(self, context: ShortcutContext, include_global: bool = True) -> list[ShortcutDef]:
        """Get all shortcuts for a context."""
        result = list(self._by_context[context])
        if include_global and context != ShortcutContext.GLOBAL:
            result.extend(self._by_context[ShortcutContext.GLOBAL])
        return result

    def get_by_category(self, context: ShortcutContext) -> dict[str, list[ShortcutDef]]:
        """Get shortcuts grouped by category, in registration order."""
        by_category: dict[str, list[ShortcutDef]] = {}
        for shortcut in self.get_for_context(context):
            by_category.setdefault(shortcut.category, []).append(shortcut)
        return by_category

    def generate_help_text(self, context: ShortcutContext, key_width: int = 16) -> list[str]:
        """Generate help lines for a context, grouped by category."""
        category_order = ["Navigation", "View", "General"]
        by_category = self.get_by_category(context)
        sorted_categories = sorted(
            by_category,
            key=lambda c: category_order.index(c) if c in category_order else 999,
        )

        lines: list[str] = []
        for category in sorted_categories:
            lines.append(f"{category}:")
            for shortcut in by_category[category]:
                lines.append(f"  {shortcut.key_display:<{key_width}}- {shortcut.description}")
            lines.append("")

        return lines[:-1] if lines else lines


def create_default_shortcuts() -> ShortcutRegistry:
    """Create the registry with all map viewer shortcuts."""
    registry = ShortcutRegistry()

    registry.register_many([
        ShortcutDef(
            id="nav_left",
            keys=["h", Key.LEFT],
            description="Move Left",
            context=[ShortcutContext.MAP],
            handler="move_left",
            category="Navigation",
        ),
        ShortcutDef(
            id="nav_right",
            keys=["l", Key.RIGHT],
            description="Move Right",
            context=[ShortcutContext.MAP],
            handler="move_right",
            category="Navigation",
        ),
        ShortcutDef(
            id="nav_up",
            keys=["k", Key.UP],
            description="Move Up",
            context=[ShortcutContext.MAP],
            handler="move_up",
            category="Navigation",
        ),
        ShortcutDef(
            id="nav_down",
            keys=["j", Key.DOWN],
            description="Move Down",
            context=[ShortcutContext.MAP],
            handler="move_down",
            category="Navigation",
        ),
        ShortcutDef(
            id="nav_half_page_down",
            keys=[Key.CTRL_D],
            description="Move Down Half Page",
            context=[ShortcutContext.MAP],
            handler="half_page_down",
            category="Navigation",
        ),
        ShortcutDef(
            id="nav_half_page_up",
            keys=[Key.CTRL_U],
            description="Move Up Half Page",
            context=[ShortcutContext.MAP],
            handler="half_page_up",
            category="Navigation",
        ),
    ])

    registry.register_many([
        ShortcutDef(
            id="toggle_rulers",
            keys=[Key.CTRL_R],
            description="Toggle Ruler",
            context=[ShortcutContext.MAP],
            handler="toggle_rulers",
            category="View",
        ),
        ShortcutDef(
            id="help",
            keys=["?"],
            description="Toggle Help Menu",
            context=[ShortcutContext.GLOBAL],
            handler="toggle_help",
            category="View",
        ),
        ShortcutDef(
            id="quit",
            keys=["q", Key.CTRL_C],
            description="Quit",
            context=[ShortcutContext.GLOBAL],
            handler="quit",
            category="General",
        ),
    ])

    return registry
