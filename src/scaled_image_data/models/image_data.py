"""Encoded image bytes flowing through a streaming pipeline."""

from scaled_image_data.image_format_detector import (
    ImageFormat,
    detect_image_format,
)


class ImageData:
    """Image bytes together with the format detected from them.

    Attributes:
        data: The encoded image bytes.
        image_format: Format detected from the leading magic numbers.

    """

    def __init__(self, data: bytes) -> None:
        """Initialize from raw bytes and detect their format."""
        self.data = data
        self.image_format: ImageFormat = detect_image_format(data)

    def __repr__(self) -> str:
        """Return a short description without dumping the bytes."""
        return (
            f"ImageData(format={self.image_format.value}, "
            f"size={len(self.data)})"
        )
