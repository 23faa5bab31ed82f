"""Decoded bitmap handed to the conversion functions.

A ``SourceImage`` wraps a ``uint8`` array laid out row-major with the colour
components of each pixel stored next to each other, the same layout a bitmap
context uses. It can be built from an array, a Pillow image or encoded bytes.
"""

import logging
from io import BytesIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from scaled_image_data.exceptions import ImageDecodeError, InvalidImageError
from scaled_image_data.image_format_detector import (
    ImageFormat,
    detect_image_format,
)

logger = logging.getLogger(__name__)

# Pillow modes whose bytes already match our interleaved layout
_DIRECT_MODES = ("L", "LA", "RGB", "RGBA")
_SUPPORTED_COMPONENTS = (1, 2, 3, 4)


def _grayscale_pixels(image: Image.Image) -> np.ndarray:
    """Return the samples of a single-band image as uint8."""
    if image.mode.startswith("I"):
        # 32-bit and 16-bit integer modes both hold 16-bit samples
        samples = np.asarray(image).astype(np.int64)
        return (np.clip(samples, 0, 0xFFFF) >> 8).astype(np.uint8)
    if image.mode == "F":
        samples = np.asarray(image, dtype=np.float32)
        return np.rint(np.clip(samples, 0.0, 255.0)).astype(np.uint8)
    return np.asarray(image.convert("L"), dtype=np.uint8)


class SourceImage:
    """A decoded bitmap with ``(height, width, components)`` uint8 pixels."""

    def __init__(self, pixels: np.ndarray) -> None:
        """Wrap a pixel array.

        Args:
            pixels: ``uint8`` array of shape ``(height, width)`` or
                ``(height, width, components)``.

        Raises:
            InvalidImageError: If the array has the wrong dtype or rank.

        """
        if not isinstance(pixels, np.ndarray) or pixels.dtype != np.uint8:
            raise InvalidImageError(InvalidImageError.default_message)
        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        if pixels.ndim != 3 or pixels.shape[2] not in _SUPPORTED_COMPONENTS:
            raise InvalidImageError(InvalidImageError.default_message)
        self.pixels = np.ascontiguousarray(pixels)

    @property
    def height(self) -> int:
        """Number of pixel rows."""
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        """Number of pixels per row."""
        return self.pixels.shape[1]

    @property
    def components_count(self) -> int:
        """Number of colour components stored per pixel."""
        return self.pixels.shape[2]

    @property
    def bytes_per_row(self) -> int:
        """Bytes in one row of interleaved pixels."""
        return self.width * self.components_count

    @property
    def has_alpha(self) -> bool:
        """Whether the last component is an alpha channel (LA or RGBA)."""
        return self.components_count in (2, 4)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "SourceImage":
        """Build a source image from a Pillow image.

        Single-channel modes (``1``, ``I``, ``I;16``, ``F``) become one
        component grayscale, with 16-bit samples keeping their high byte.
        Palette and other exotic modes are converted to RGBA when they carry
        transparency and to RGB otherwise.
        """
        if image.mode != "P" and len(image.getbands()) == 1:
            if image.mode != "L":
                logger.debug("Converting %s image to L", image.mode)
            return cls(_grayscale_pixels(image))
        if image.mode not in _DIRECT_MODES:
            target_mode = "RGBA" if image.has_transparency_data else "RGB"
            logger.debug("Converting %s image to %s", image.mode, target_mode)
            try:
                image = image.convert(target_mode)
            except ValueError as err:
                raise InvalidImageError(str(err)) from err
        return cls(np.asarray(image, dtype=np.uint8))

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        size: tuple[int, int] | None = None,
        components_count: int | None = None,
    ) -> "SourceImage":
        """Decode encoded image bytes or wrap a raw interleaved buffer.

        Args:
            data: PNG, JPEG, GIF, BMP, WebP or TIFF bytes, or raw pixels.
            size: ``(width, height)`` of raw pixel data. Required to accept
                bytes without a recognised signature.
            components_count: Components per raw pixel. Inferred from the
                buffer length when omitted.

        Raises:
            ImageDecodeError: If the data is neither a decodable image nor a
                raw buffer of the given size.

        """
        image_format = detect_image_format(data)
        if image_format is ImageFormat.UNSPECIFIED:
            if size is None:
                err = "Unrecognised image data and no raw size given"
                raise ImageDecodeError(err)
            return cls._from_raw(data, size, components_count)

        try:
            with Image.open(BytesIO(data)) as image:
                image.load()
                return cls.from_pil(image)
        except (UnidentifiedImageError, OSError) as err:
            raise ImageDecodeError(ImageDecodeError.default_message) from err

    @classmethod
    def _from_raw(
        cls,
        data: bytes,
        size: tuple[int, int],
        components_count: int | None,
    ) -> "SourceImage":
        width, height = size
        pixel_count = width * height
        if components_count is None:
            if pixel_count <= 0 or len(data) % pixel_count:
                err = f"Raw buffer of {len(data)} bytes does not fit {size}"
                raise ImageDecodeError(err)
            components_count = len(data) // pixel_count

        if len(data) != pixel_count * components_count:
            err = (
                f"Raw buffer of {len(data)} bytes does not match "
                f"{width}x{height}x{components_count}"
            )
            raise ImageDecodeError(err)

        pixels = np.frombuffer(data, dtype=np.uint8).reshape(
            height, width, components_count
        )
        try:
            return cls(pixels)
        except InvalidImageError as err:
            raise ImageDecodeError(str(err)) from err

    def __repr__(self) -> str:
        """Return the geometry of the bitmap."""
        return (
            f"SourceImage(width={self.width}, height={self.height}, "
            f"components={self.components_count})"
        )
