"""Interactive map viewer: the frame loop tying terminal, input and widgets together."""

from __future__ import annotations

import logging
from typing import Optional

from mapscope.config import ViewerConfig
from mapscope.core.glyphs import CellRenderer
from mapscope.core.grid import Grid
from mapscope.cli.core.terminal import Terminal, TerminalSize
from mapscope.cli.core.input import InputEvent, InputReader, KeyEvent, MouseEvent
from mapscope.cli.core.shortcuts import ShortcutContext, create_default_shortcuts
from mapscope.cli.widgets.base import Rect
from mapscope.cli.widgets.help_overlay import HelpOverlayWidget
from mapscope.cli.widgets.map_canvas import MapCanvasWidget

logger = logging.getLogger(__name__)


def build_grid(config: ViewerConfig) -> Grid:
    """Create the starting map for a configuration."""
    if config.seed_mode == "noise":
        from mapscope.core.noise import PerlinSampler

        sampler = PerlinSampler(seed=config.noise_seed, octaves=config.noise_octaves)
        return Grid.from_noise(config.map_width, config.map_height, sampler, config.noise_scale)
    return Grid.empty(config.map_width, config.map_height)


class MapViewerApp:
    """
    Terminal map viewer.

    Keyboard:
        h/j/k/l, arrows: Pan one cell
        Ctrl+d / Ctrl+u: Half page down / up
        Ctrl+r: Toggle rulers
        ?: Toggle help
        q: Quit

    Mouse:
        Left click: Paint cell
        Right click: Erase cell
    """

    def __init__(
        self,
        config: Optional[ViewerConfig] = None,
        grid: Optional[Grid] = None,
        input_reader: Optional[InputReader] = None,
    ) -> None:
        self.config = (config or ViewerConfig()).validate()
        self.running = False
        self.input = input_reader

        self._shortcuts = create_default_shortcuts()
        self.canvas = MapCanvasWidget(
            grid if grid is not None else build_grid(self.config),
            renderer=CellRenderer(self.config.glyph_policy),
            rulers=self.config.rulers,
            show_rulers=self.config.show_rulers,
            shortcuts=self._shortcuts,
        )
        self.help = HelpOverlayWidget(self._shortcuts)
        self.help.visible = self.config.show_help

    def run(self) -> None:
        """Main application loop."""
        self.running = True
        if self.input is None:
            self.input = InputReader()
        logger.info(
            "Starting viewer: %dx%d map, %s glyphs",
            self.canvas.grid.width, self.canvas.grid.height, self.config.glyph_policy.value,
        )

        with Terminal.managed_mode(mouse=True):
            Terminal.write_frame(self.compose_frame(Terminal.size()))
            while self.running:
                event = self.input.read(timeout=self.config.frame_timeout)
                size = Terminal.size()
                self.canvas.sync(size.cols, size.rows)
                if event is not None:
                    self.handle_event(event)
                Terminal.write_frame(self.compose_frame(size))

        logger.info("Viewer stopped")

    def compose_frame(self, size: TerminalSize) -> list[str]:
        """Render map rows with the help box on top when shown."""
        lines = self.canvas.render(Rect(0, 0, size.cols, size.rows))
        return self.help.overlay(lines, size.cols, size.rows)

    def handle_event(self, event: InputEvent) -> None:
        """Apply one key or mouse event."""
        if isinstance(event, MouseEvent):
            self.canvas.handle_mouse(event)
            return
        self.handle_key(event)

    def handle_key(self, event: KeyEvent) -> bool:
        shortcut = self._shortcuts.match(event, ShortcutContext.MAP)
        if shortcut is None:
            return False
        for target in (self, self.canvas):
            handler = getattr(target, shortcut.handler, None)
            if handler is not None:
                handler()
                logger.debug("%s -> %s", shortcut.id, self.canvas.get_status())
                return True
        return False

    def toggle_help(self) -> None:
        logger.debug("Help %s", "shown" if self.help.toggle() else "hidden")

    def quit(self) -> None:
        self.running = False


def run_viewer(config: Optional[ViewerConfig] = None) -> None:
    """Launch the viewer application."""
    app = MapViewerApp(config)
    app.run()
