import numpy as np
import pytest

from slider_gap import InvalidBufferFormat, PixelBuffer, binarize, binarize_with_coordinates, black_pixel_coordinates


def _random_buffer(seed=0, width=17, height=11):
    rng = np.random.default_rng(seed)
    return PixelBuffer(rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8))


@pytest.mark.parametrize("threshold", [0, 1, 100, 127, 254, 255])
def test_binarize_leaves_only_black_and_white_with_alpha_untouched(threshold):
    buffer = _random_buffer()
    alpha = buffer.data[:, :, 3].copy()

    binarize(buffer, threshold)

    rgb = buffer.data[:, :, :3]
    black = (rgb == 0).all(axis=2)
    white = (rgb == 255).all(axis=2)
    assert (black | white).all()
    assert np.array_equal(buffer.data[:, :, 3], alpha)


@pytest.mark.parametrize("threshold", [0, 64, 100, 255])
def test_binarize_is_idempotent(threshold):
    once = binarize(_random_buffer(seed=3), threshold)
    twice = binarize(once.copy(), threshold)

    assert np.array_equal(once.data, twice.data)


def test_luminance_equal_to_threshold_turns_black():
    data = np.array([[[100, 100, 100, 7], [101, 100, 100, 9]]], dtype=np.uint8)
    buffer = binarize(PixelBuffer(data), 100)

    assert buffer.data[0, 0].tolist() == [0, 0, 0, 7]
    assert buffer.data[0, 1].tolist() == [255, 255, 255, 9]


def test_binarize_mutates_in_place():
    buffer = _random_buffer()
    data = buffer.data

    assert binarize(buffer, 100) is buffer
    assert buffer.data is data


def test_callbacks_fire_in_raster_order_with_byte_offsets():
    data = np.array(
        [
            [[0, 0, 0, 255], [250, 250, 250, 255]],
            [[240, 240, 240, 255], [5, 5, 5, 255]],
        ],
        dtype=np.uint8,
    )
    events = []

    binarize(
        PixelBuffer(data),
        100,
        on_white=lambda offset: events.append(("white", offset)),
        on_black=lambda offset: events.append(("black", offset)),
    )

    assert events == [("black", 0), ("white", 4), ("white", 8), ("black", 12)]


def test_single_callback_is_enough():
    data = np.zeros((2, 3, 4), dtype=np.uint8)
    data[0, 1, :3] = 255
    seen = []

    binarize(PixelBuffer(data), 100, on_black=seen.append)

    assert seen == [0, 8, 12, 16, 20]


def test_threshold_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        binarize(_random_buffer(), 256)
    with pytest.raises(ValueError):
        binarize(_random_buffer(), -1)


def test_binarize_requires_a_pixel_buffer():
    with pytest.raises(InvalidBufferFormat):
        binarize(np.zeros((2, 2, 4), dtype=np.uint8), 100)


def test_black_pixel_coordinates_follow_raster_order():
    data = np.full((3, 5, 4), 255, dtype=np.uint8)
    for x, y in [(3, 0), (1, 1), (2, 1), (0, 2)]:
        data[y, x, :3] = 0

    coordinates = black_pixel_coordinates(PixelBuffer(data))

    assert coordinates == ((3, 0), (1, 1), (2, 1), (0, 2))
    assert coordinates[0].x == 3 and coordinates[0].y == 0


def test_coordinates_match_black_callback_offsets():
    buffer = _random_buffer(seed=5)
    offsets = []
    binarize(buffer.copy(), 90, on_black=offsets.append)

    _, coordinates = binarize_with_coordinates(buffer, 90)

    width = buffer.width
    assert [(o // 4 % width, o // 4 // width) for o in offsets] == list(coordinates)
