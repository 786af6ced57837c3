"""RGBA pixel buffers and the image decode/encode boundary around them."""
import base64
from dataclasses import dataclass
from io import BytesIO

import cv2
import numpy as np
from PIL import Image

from .errors import DebugRenderError, InvalidBufferFormat

CHANNELS = 4


@dataclass
class PixelBuffer:
    """Row-major RGBA samples, one ``uint8`` array of shape (height, width, 4)."""

    data: np.ndarray

    def __post_init__(self):
        arr = self.data
        if not isinstance(arr, np.ndarray):
            raise InvalidBufferFormat(f"Expected a numpy array, got {type(arr).__name__}")
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise InvalidBufferFormat(f"Expected shape (height, width, 4), got {arr.shape}")
        if arr.dtype != np.uint8:
            raise InvalidBufferFormat(f"Expected uint8 samples, got {arr.dtype}")

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.data.copy())

    def rgb_samples(self) -> np.ndarray:
        # Flat [r, g, b, r, g, b, ...] without the alpha channel
        return self.data[:, :, :3].reshape(-1).copy()

    @classmethod
    def from_bytes(cls, width: int, height: int, data) -> "PixelBuffer":
        if width <= 0 or height <= 0:
            raise InvalidBufferFormat(f"Invalid buffer size {width}x{height}")
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise InvalidBufferFormat(
                f"Expected {expected} bytes for a {width}x{height} RGBA buffer, got {len(data)}"
            )
        arr = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNELS)
        # frombuffer views are read-only; the binarizer needs to write
        return cls(arr.copy())

    @classmethod
    def from_array(cls, array) -> "PixelBuffer":
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] not in (3, CHANNELS):
            raise InvalidBufferFormat(f"Expected an RGB or RGBA image array, got shape {arr.shape}")
        if arr.dtype != np.uint8:
            if arr.size and (arr.min() < 0 or arr.max() > 255):
                raise InvalidBufferFormat("Pixel samples must lie in 0-255")
            arr = arr.astype(np.uint8)
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr, alpha], axis=2)
        return cls(np.ascontiguousarray(arr).copy())

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        return cls(np.array(image.convert("RGBA"), dtype=np.uint8))


def decode_image_bytes(data: bytes) -> PixelBuffer:
    # Use Pillow to open the image data
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except Exception as e:
        raise InvalidBufferFormat(f"Pillow could not open image data: {e}") from e
    return PixelBuffer.from_image(image)


def decode_base64_image(text: str) -> PixelBuffer:
    # Tolerate data URLs as handed over by browser canvases
    if text.startswith("data:") and "," in text:
        text = text.split(",", 1)[1]
    try:
        data = base64.b64decode(text, validate=True)
    except Exception as e:
        raise InvalidBufferFormat(f"Base64 decoding failed: {e}") from e
    return decode_image_bytes(data)


def encode_png_base64(buffer: PixelBuffer) -> str:
    try:
        bgra = cv2.cvtColor(buffer.data, cv2.COLOR_RGBA2BGRA)
        ok, encoded = cv2.imencode(".png", bgra)
    except cv2.error as e:
        raise DebugRenderError(f"OpenCV could not encode the buffer as PNG: {e}") from e
    if not ok:
        raise DebugRenderError("OpenCV could not encode the buffer as PNG")
    return base64.b64encode(encoded.tobytes()).decode("ascii")
