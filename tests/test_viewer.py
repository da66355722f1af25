"""Tests for the viewer app, configuration and CLI (no real terminal)."""

import logging
import subprocess
import sys

import pytest
from typer.testing import CliRunner

from mapscope.cli.app import create_app
from mapscope.cli.core.ansi_text import visible_len
from mapscope.cli.core.input import Key, KeyEvent, MouseButton, MouseEvent
from mapscope.cli.core.terminal import TerminalSize
from mapscope.cli.studio.viewer import MapViewerApp, build_grid
from mapscope.config import ViewerConfig
from mapscope.core.constants import MAX_VALUE
from mapscope.core.glyphs import GlyphPolicy
from mapscope.logging_config import setup_logging


@pytest.fixture
def app() -> MapViewerApp:
    return MapViewerApp(ViewerConfig(map_width=60, map_height=40, show_help=False))


class TestViewerConfig:

    def test_defaults(self) -> None:
        config = ViewerConfig().validate()
        assert (config.map_width, config.map_height) == (200, 200)
        assert config.glyph_policy is GlyphPolicy.BINARY
        assert config.show_rulers and config.show_help
        assert config.level == logging.DEBUG

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"map_width": 0},
            {"map_height": -5},
            {"seed_mode": "fractal"},
            {"frame_timeout": 0},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid(self, kwargs) -> None:
        with pytest.raises(ValueError):
            ViewerConfig(**kwargs).validate()

    def test_build_grid_empty(self) -> None:
        grid = build_grid(ViewerConfig(map_width=30, map_height=20))
        assert (grid.width, grid.height) == (30, 20)
        assert grid.get(0, 0) == MAX_VALUE

    def test_build_grid_noise(self) -> None:
        config = ViewerConfig(map_width=10, map_height=8, seed_mode="noise")
        a, b = build_grid(config), build_grid(config)
        assert list(a.rows()) == list(b.rows())


class TestMapViewerApp:

    def test_frame_matches_terminal(self, app: MapViewerApp) -> None:
        frame = app.compose_frame(TerminalSize(rows=12, cols=40))
        assert len(frame) == 12
        assert all(visible_len(line) == 40 for line in frame)

    def test_frame_with_help(self) -> None:
        app = MapViewerApp(ViewerConfig(map_width=60, map_height=40))
        frame = app.compose_frame(TerminalSize(rows=24, cols=80))
        assert len(frame) == 24
        assert all(visible_len(line) == 80 for line in frame)
        assert any("Help Menu" in line for line in frame)

    def test_quit_keys(self, app: MapViewerApp) -> None:
        app.running = True
        app.handle_event(KeyEvent(char="q"))
        assert app.running is False

        app.running = True
        app.handle_event(KeyEvent(key=Key.CTRL_C))
        assert app.running is False

    def test_help_toggle(self, app: MapViewerApp) -> None:
        assert app.help.visible is False
        assert app.handle_key(KeyEvent(char="?"))
        assert app.help.visible is True
        app.handle_key(KeyEvent(char="?"))
        assert app.help.visible is False

    def test_keys_reach_canvas(self, app: MapViewerApp) -> None:
        app.canvas.sync(20, 10)
        app.handle_event(KeyEvent(char="l"))
        app.handle_event(KeyEvent(key=Key.DOWN))
        assert (app.canvas.camera.x, app.canvas.camera.y) == (1, 1)
        assert app.handle_key(KeyEvent(char="x")) is False

    def test_mouse_reaches_canvas(self, app: MapViewerApp) -> None:
        app.compose_frame(TerminalSize(rows=10, cols=20))
        app.handle_event(MouseEvent(button=MouseButton.LEFT, column=7, row=2))
        assert app.canvas.grid.get(3, 1) == MAX_VALUE

    def test_resize_clamps_camera(self, app: MapViewerApp) -> None:
        app.canvas.sync(20, 10)
        app.canvas.camera.x, app.canvas.camera.y = 44, 32
        app.compose_frame(TerminalSize(rows=30, cols=40))
        # 40 cols - 4 ruler = 36 wide, 30 rows - 2 ruler = 28 high
        assert (app.canvas.camera.x, app.canvas.camera.y) == (24, 12)


class TestCli:

    def test_invalid_size_exits(self) -> None:
        result = CliRunner().invoke(create_app(), ["--width", "0"])
        assert result.exit_code == 2

    def test_help(self) -> None:
        result = CliRunner().invoke(create_app(), ["--help"])
        assert result.exit_code == 0
        assert "--noise" in result.output

    def test_terminal_failure_is_reported(self, tmp_path) -> None:
        log_file = tmp_path / "viewer.log"
        result = subprocess.run(
            [sys.executable, "-m", "mapscope.cli.main", "--log-file", str(log_file)],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=30,
        )
        assert result.returncode == 1
        assert "Terminal error:" in result.stderr
        assert "Traceback" not in result.stderr
        assert "Terminal failure" in log_file.read_text()


class TestLogging:

    def test_writes_to_file(self, tmp_path) -> None:
        log_file = tmp_path / "viewer.log"
        logger = setup_logging(logging.DEBUG, log_file)
        logging.getLogger("mapscope.view.camera").debug("probe message")
        for handler in logger.handlers:
            handler.flush()
        assert "probe message" in log_file.read_text()
        setup_logging(logging.DEBUG, None)

    def test_reinitialise_replaces_handlers(self, tmp_path) -> None:
        logger = setup_logging(logging.INFO, tmp_path / "a.log")
        setup_logging(logging.INFO, tmp_path / "b.log")
        assert len(logger.handlers) == 1
        setup_logging(logging.DEBUG, None)
