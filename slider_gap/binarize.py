"""Luminance thresholding of RGBA buffers."""
from typing import Callable, NamedTuple, Optional, Tuple

import numpy as np

from .buffer import CHANNELS, PixelBuffer
from .errors import InvalidBufferFormat

PixelCallback = Optional[Callable[[int], None]]


class Coordinate(NamedTuple):
    x: int
    y: int


def _check_inputs(buffer, threshold):
    if not isinstance(buffer, PixelBuffer):
        raise InvalidBufferFormat(f"Expected a PixelBuffer, got {type(buffer).__name__}")
    if not 0 <= threshold <= 255:
        raise ValueError(f"Threshold must lie in 0-255, got {threshold}")


def _white_mask(data: np.ndarray, threshold) -> np.ndarray:
    luminance = data[:, :, :3].astype(np.uint16).sum(axis=2) / 3.0
    return luminance > threshold


def binarize(buffer: PixelBuffer, threshold, on_white: PixelCallback = None,
             on_black: PixelCallback = None) -> PixelBuffer:
    """Turn every pixel pure white or pure black in place, keeping alpha.

    A pixel whose mean of R, G and B is above ``threshold`` becomes white,
    anything else (equality included) becomes black. ``on_white`` and
    ``on_black`` receive the byte offset of each pixel, in raster order.
    """
    _check_inputs(buffer, threshold)
    data = buffer.data
    white = _white_mask(data, threshold)

    data[white, :3] = 255
    data[~white, :3] = 0

    if on_white is not None or on_black is not None:
        for index, is_white in enumerate(white.ravel().tolist()):
            offset = index * CHANNELS
            if is_white:
                if on_white is not None:
                    on_white(offset)
            elif on_black is not None:
                on_black(offset)
    return buffer


def black_pixel_coordinates(buffer: PixelBuffer) -> Tuple[Coordinate, ...]:
    """Coordinates of the black pixels of a binarized buffer, in raster order."""
    if not isinstance(buffer, PixelBuffer):
        raise InvalidBufferFormat(f"Expected a PixelBuffer, got {type(buffer).__name__}")
    black = ~buffer.data[:, :, :3].any(axis=2)
    # np.nonzero walks the mask row by row, left to right
    ys, xs = np.nonzero(black)
    return tuple(Coordinate(int(x), int(y)) for y, x in zip(ys.tolist(), xs.tolist()))


def binarize_with_coordinates(buffer: PixelBuffer, threshold) -> Tuple[PixelBuffer, Tuple[Coordinate, ...]]:
    binarize(buffer, threshold)
    return buffer, black_pixel_coordinates(buffer)
