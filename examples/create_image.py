"""Random image creation utilities."""

import io
import secrets
from collections.abc import AsyncIterator

from PIL import Image, ImageDraw

from scaled_image_data.models import ImageData


def create_random_image(
    width: int = 640, height: int = 480, img_format: str = "JPEG"
) -> bytes:
    """Create a random test image with random shapes and colors.

    Args:
        width: Width of the test image in pixels
        height: Height of the test image in pixels
        img_format: Pillow format name. PNG keeps an alpha channel.

    Returns:
        Encoded image bytes

    """
    mode = "RGBA" if img_format.upper() == "PNG" else "RGB"
    image = Image.new(
        mode,
        (width, height),
        (
            secrets.randbits(8),
            secrets.randbits(8),
            secrets.randbits(8),
            255,
        )[: len(mode)],
    )

    draw = ImageDraw.Draw(image)

    # Draw some random shapes
    for _ in range(3):
        # Random coordinates
        x0 = secrets.randbelow(width)
        y0 = secrets.randbelow(height)
        x1 = secrets.randbelow(width)
        y1 = secrets.randbelow(height)

        # Random color, translucent where the mode allows it
        color = (
            secrets.randbits(8),
            secrets.randbits(8),
            secrets.randbits(8),
            secrets.randbits(8),
        )[: len(mode)]

        draw.rectangle(
            [min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)], fill=color
        )

    img_byte_arr = io.BytesIO()
    image.save(img_byte_arr, format=img_format)
    return img_byte_arr.getvalue()


async def iter_frames(
    count: int, width: int = 640, height: int = 480
) -> AsyncIterator[ImageData]:
    """Yield ``count`` random frames, alternating JPEG and PNG."""
    for index in range(count):
        img_format = "PNG" if index % 2 else "JPEG"
        yield ImageData(create_random_image(width, height, img_format))
