#!/usr/bin/env python3
"""Example script scaling a stream of camera frames into model batches."""

import asyncio
import logging
import os
import sys
import time

from dotenv import load_dotenv

from examples.create_image import iter_frames
from scaled_image_data import ScalingOptions
from scaled_image_data.transformers import ImageScaler, TensorBatcher


async def run_example(
    logger: logging.Logger,
    options: ScalingOptions,
    frame_count: int,
    max_batch_size: int,
) -> int:
    """Scale ``frame_count`` random frames and log each batch.

    Args:
    ----
        logger: Logger instance for output
        options: Description of the model input
        frame_count: Number of random frames to generate
        max_batch_size: Maximum number of frames stacked per batch

    Returns:
    -------
        Number of frames that reached a batch

    """
    batches = TensorBatcher(
        ImageScaler(iter_frames(frame_count), options),
        max_batch_size=max_batch_size,
    )

    received = 0
    start_time = time.time()
    async for batch in batches:
        received += batch.shape[0]
        elapsed = time.time() - start_time
        rate = received / elapsed if elapsed > 0 else 0
        logger.info(
            "Batch %s %s range [%.3f, %.3f] (%.1f frames/sec)",
            batch.shape,
            batch.dtype,
            float(batch.min()),
            float(batch.max()),
            rate,
        )
    return received


async def main() -> int:
    """Run the scaling example."""
    logger = logging.getLogger(__name__)
    _ = load_dotenv()

    frame_count = int(os.getenv("FRAME_COUNT", "20"))
    options = ScalingOptions(
        width=int(os.getenv("MODEL_WIDTH", "224")),
        height=int(os.getenv("MODEL_HEIGHT", "224")),
        components_count=int(os.getenv("MODEL_COMPONENTS", "3")),
        is_quantized=os.getenv("MODEL_QUANTIZED", "false").lower() == "true",
    )
    logger.info("Scaling %d frames with %s", frame_count, options)

    received = await run_example(logger, options, frame_count, 8)

    if received == frame_count:
        logger.info("✓ SUCCESS: %d frames scaled", received)
        return 0
    logger.error(
        "✗ INCOMPLETE: generated=%d scaled=%d", frame_count, received
    )
    return 1


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    sys.exit(asyncio.run(main()))
