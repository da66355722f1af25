"""Pytest configuration and shared fixtures."""

import os
from typing import Iterator

import pytest

from mapscope.core.grid import Grid
from mapscope.cli.core.input import InputReader


@pytest.fixture
def grid() -> Grid:
    """The stock 200x200 map: all zero with landmark cells."""
    return Grid.empty(200, 200)


@pytest.fixture
def small_grid() -> Grid:
    """A 12x8 zero grid, small enough to reason about cell by cell."""
    return Grid(12, 8)


@pytest.fixture
def pipe_input() -> Iterator[tuple[InputReader, int]]:
    """InputReader on the read end of a pipe; yields (reader, write_fd)."""
    read_fd, write_fd = os.pipe()
    try:
        yield InputReader(fd=read_fd), write_fd
    finally:
        os.close(read_fd)
        os.close(write_fd)
