"""Tests for decoding raw terminal input into events."""

import os

from mapscope.cli.core.input import InputReader, Key, KeyEvent, MouseButton, MouseEvent


def feed(write_fd: int, data: bytes) -> None:
    os.write(write_fd, data)


class TestKeys:

    def test_no_input_times_out(self, pipe_input) -> None:
        reader, _ = pipe_input
        assert reader.read(timeout=0.01) is None

    def test_printable_chars_in_order(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"jk?")
        assert reader.read(timeout=0.1) == KeyEvent(char="j", raw="j")
        assert reader.read(timeout=0.1).char == "k"
        assert reader.read(timeout=0.1).char == "?"

    def test_control_chords(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x04\x15\x12\x03")
        keys = [reader.read(timeout=0.1).key for _ in range(4)]
        assert keys == [Key.CTRL_D, Key.CTRL_U, Key.CTRL_R, Key.CTRL_C]

    def test_arrow_keys(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x1b[A\x1b[D\x1bOB")
        assert reader.read(timeout=0.1).key == Key.UP
        assert reader.read(timeout=0.1).key == Key.LEFT
        assert reader.read(timeout=0.1).key == Key.DOWN

    def test_lone_escape(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x1b")
        assert reader.read(timeout=0.1).key == Key.ESCAPE

    def test_unbound_keys_have_no_name(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x1b[5~\rq")
        assert reader.read(timeout=0.1) == KeyEvent(raw="\x1b[5~")
        # Enter is a bare control byte and is dropped
        assert reader.read(timeout=0.1) is None
        assert reader.read(timeout=0.1).char == "q"


class TestMouse:

    def test_left_press(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x1b[<0;5;3M")
        event = reader.read(timeout=0.1)
        assert isinstance(event, MouseEvent)
        assert event.button is MouseButton.LEFT
        assert (event.column, event.row) == (4, 2)
        assert event.pressed is True

    def test_right_release(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x1b[<2;1;1m")
        event = reader.read(timeout=0.1)
        assert event.button is MouseButton.RIGHT
        assert (event.column, event.row) == (0, 0)
        assert event.pressed is False

    def test_wheel_and_modifiers(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x1b[<64;10;10M\x1b[<16;2;2M")
        assert reader.read(timeout=0.1).button is MouseButton.WHEEL_UP
        # Ctrl held with left button
        assert reader.read(timeout=0.1).button is MouseButton.LEFT

    def test_mouse_then_key(self, pipe_input) -> None:
        reader, write_fd = pipe_input
        feed(write_fd, b"\x1b[<0;12;4Mq")
        assert isinstance(reader.read(timeout=0.1), MouseEvent)
        assert reader.read(timeout=0.1).char == "q"
