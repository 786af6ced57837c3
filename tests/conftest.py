"""Pytest configuration and synthetic captcha builders shared across the suite."""

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slider_gap import PixelBuffer  # noqa: E402


def draw_lines(width, height, lines, background=(255, 255, 255, 255), ink=(10, 10, 10, 255)):
    """Buffer filled with ``background`` and dark vertical segments ``(column, start_row, length)``."""
    data = np.empty((height, width, 4), dtype=np.uint8)
    data[:, :] = background
    for column, start, length in lines:
        data[start:start + length, column] = ink
    return PixelBuffer(data)


def column_coordinates(column, start, length):
    return [(column, y) for y in range(start, start + length)]


def raster(coordinates):
    """Order coordinates the way a row-major scan emits them."""
    return sorted(coordinates, key=lambda p: (p[1], p[0]))


@pytest.fixture
def gap_buffer():
    # Two unbroken piece edges 85 pixels apart
    return draw_lines(200, 100, [(20, 5, 87), (105, 5, 87)])
