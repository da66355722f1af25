"""Typer CLI application."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from mapscope.config import DEFAULT_LOG_FILE, FRAME_TIMEOUT, ViewerConfig
from mapscope.core.constants import MAP_HEIGHT, MAP_WIDTH, NOISE_SCALE, NOISE_SEED
from mapscope.core.glyphs import GlyphPolicy
from mapscope.logging_config import setup_logging

logger = logging.getLogger(__name__)


class GlyphChoice(str, Enum):
    binary = "binary"
    four_band = "four-band"


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="mapscope",
        help="Pan, inspect and paint a large 2D map in the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def view(
        width: Annotated[int, typer.Option("--width", "-W", help="Map width in cells")] = MAP_WIDTH,
        height: Annotated[int, typer.Option("--height", "-H", help="Map height in cells")] = MAP_HEIGHT,
        noise: Annotated[bool, typer.Option("--noise/--empty", help="Seed the map from Perlin noise")] = False,
        seed: Annotated[int, typer.Option("--seed", help="Noise seed")] = NOISE_SEED,
        scale: Annotated[float, typer.Option("--scale", help="Noise frequency")] = NOISE_SCALE,
        glyphs: Annotated[
            Optional[GlyphChoice],
            typer.Option("--glyphs", "-g", help="Glyph policy [default: binary, four-band with --noise]"),
        ] = None,
        rulers: Annotated[bool, typer.Option("--rulers/--no-rulers", help="Show coordinate rulers")] = True,
        show_help: Annotated[bool, typer.Option("--help-overlay/--no-help-overlay", help="Show help at startup")] = True,
        timeout: Annotated[float, typer.Option("--frame-timeout", help="Seconds to wait for input per frame")] = FRAME_TIMEOUT,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Debug log path")] = DEFAULT_LOG_FILE,
        log_level: Annotated[str, typer.Option("--log-level", help="Log level")] = "DEBUG",
    ) -> None:
        """Open the interactive map viewer."""
        if glyphs is None:
            policy = GlyphPolicy.FOUR_BAND if noise else GlyphPolicy.BINARY
        else:
            policy = GlyphPolicy(glyphs.value)

        config = ViewerConfig(
            map_width=width,
            map_height=height,
            show_rulers=rulers,
            show_help=show_help,
            seed_mode="noise" if noise else "empty",
            glyph_policy=policy,
            noise_seed=seed,
            noise_scale=scale,
            frame_timeout=timeout,
            log_file=log_file,
            log_level=log_level,
        )
        try:
            config.validate()
        except ValueError as e:
            console.print(f"[red]Invalid configuration:[/] {e}")
            raise typer.Exit(2)

        setup_logging(config.level, config.log_file)

        from mapscope.cli.studio.viewer import run_viewer
        try:
            run_viewer(config)
        except OSError as e:
            logger.exception("Terminal failure")
            console.print(f"[red]Terminal error:[/] {e}")
            raise typer.Exit(1)

    return app
