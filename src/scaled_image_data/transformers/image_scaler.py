"""Streaming scaler turning encoded camera frames into model tensors."""

import asyncio
import logging
from collections.abc import AsyncIterator

import numpy as np

from scaled_image_data.models import ImageData, SourceImage
from scaled_image_data.options import ScalingOptions
from scaled_image_data.transformers.async_transformer import AsyncTransformer
from scaled_image_data.transformers.core import scale_image

logger = logging.getLogger(__name__)


class ImageScaler(AsyncTransformer[ImageData, np.ndarray]):
    """Transform ImageData into tensors shaped for a model.

    Frames that cannot be scaled (no pixels, or fewer components than the
    model needs) are skipped and logged, so the iterator only yields arrays.

    Example:
        ```python
        options = ScalingOptions(width=224, height=224, is_quantized=False)
        async for tensor in ImageScaler(camera_frames(), options):
            interpreter.run(tensor)
        ```

    """

    def __init__(
        self,
        source: AsyncIterator[ImageData],
        options: ScalingOptions | None = None,
    ) -> None:
        """Initialize with source iterator.

        Args:
            source: Iterator yielding ImageData objects
            options: Model input description. Defaults to ScalingOptions().

        """
        super().__init__(source)
        self.options = options or ScalingOptions()

    async def transform(self, data: ImageData) -> np.ndarray | None:
        """Decode and scale one frame; ``None`` if it cannot be scaled."""

        def process_image() -> np.ndarray | None:
            image = SourceImage.from_bytes(data.data)
            return scale_image(image, self.options)

        # Use thread pool for CPU-intensive processing
        scaled = await asyncio.to_thread(process_image)
        if scaled is None:
            logger.warning("Skipping frame that could not be scaled: %r", data)
        return scaled
