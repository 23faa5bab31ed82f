"""Core conversion functions that operate on a single SourceImage.

This module draws a bitmap at the resolution a model expects, drops the alpha
channel and lays the samples out row-major with components adjacent. Nothing
here is asynchronous, so the functions can be called directly or from a worker
thread by the streaming transformers.

A precondition failure (an image without pixels, or a request for more
components than the image stores) returns ``None`` rather than raising.
"""

import logging

import cv2 as cv
import numpy as np

from scaled_image_data.consts import MAX_RGB_VALUE, MEAN_RGB_VALUE, STD_RGB_VALUE
from scaled_image_data.models import SourceImage
from scaled_image_data.options import ScalingOptions
from scaled_image_data.resampling import ResamplingAlgorithm

logger = logging.getLogger(__name__)

__all__ = [
    "ResamplingAlgorithm",
    "normalize_pixels",
    "scale_image",
    "scaled_image_array",
    "scaled_image_data",
]


def _premultiply(pixels: np.ndarray) -> np.ndarray:
    """Multiply colour components by the trailing alpha component."""
    alpha = pixels[:, :, -1:].astype(np.float32) / MAX_RGB_VALUE
    color = np.rint(pixels[:, :, :-1].astype(np.float32) * alpha)
    return np.concatenate(
        [color.astype(np.uint8), pixels[:, :, -1:]], axis=2
    )


def _draw(image: SourceImage, options: ScalingOptions) -> np.ndarray | None:
    """Draw ``image`` at the target size as a ``(batch, h, w, c)`` array.

    Returns ``None`` when the image cannot provide the requested samples.
    """
    if image.width == 0 or image.height == 0:
        logger.debug("Rejecting %r: image has no pixels", image)
        return None
    if options.components_count > image.components_count:
        logger.debug(
            "Rejecting %r: %d components requested but only %d available",
            image,
            options.components_count,
            image.components_count,
        )
        return None

    pixels = image.pixels
    if image.has_alpha and options.premultiply_alpha:
        pixels = _premultiply(pixels)

    if (image.width, image.height) == options.size:
        resized = pixels
    else:
        logger.debug(
            "Resizing %dx%d to %dx%d using %s",
            image.width,
            image.height,
            options.width,
            options.height,
            options.resampling.name,
        )
        resized = cv.resize(
            pixels, options.size, interpolation=options.resampling.value
        )
        # OpenCV drops the channel axis of single-channel images
        if resized.ndim == 2:
            resized = resized[:, :, np.newaxis]

    # Alpha is always last, so slicing leading components discards it
    sample = resized[:, :, : options.components_count]
    return np.repeat(sample[np.newaxis], options.batch_size, axis=0)


def normalize_pixels(pixels: np.ndarray) -> np.ndarray:
    """Map byte samples from [0, 255] to float32 values in [-1, 1].

    Args:
        pixels: Array of samples in the integer range [0, 255].

    Returns:
        ``(value - mean) / std`` for every sample, as float32.

    """
    return (pixels.astype(np.float32) - MEAN_RGB_VALUE) / STD_RGB_VALUE


def scaled_image_data(
    image: SourceImage,
    size: tuple[float, float],
    components_count: int,
    batch_size: int,
    *,
    resampling: ResamplingAlgorithm = ResamplingAlgorithm.BILINEAR,
    premultiply_alpha: bool = True,
) -> bytes | None:
    """Return scaled image bytes for a quantized model.

    Args:
        image: The bitmap to scale.
        size: ``(width, height)`` the model was trained on. Fractional
            sizes are truncated to whole pixels.
        components_count: Number of colour components kept per pixel.
        batch_size: Number of copies of the image in the buffer.
        resampling: Interpolation used when resizing.
        premultiply_alpha: Whether colour is multiplied by alpha first.

    Returns:
        A flat buffer of ``width * height * components_count * batch_size``
        bytes, row-major with components adjacent, or ``None`` if the image
        could not be scaled.

    Raises:
        InvalidOptionsError: If size, components or batch are not positive.

    """
    options = ScalingOptions(
        width=size[0],
        height=size[1],
        components_count=components_count,
        batch_size=batch_size,
        resampling=resampling,
        premultiply_alpha=premultiply_alpha,
    )
    drawn = _draw(image, options)
    if drawn is None:
        return None
    return drawn.tobytes()


def scaled_image_array(
    image: SourceImage,
    size: tuple[float, float],
    components_count: int,
    batch_size: int,
    *,
    is_quantized: bool,
    resampling: ResamplingAlgorithm = ResamplingAlgorithm.BILINEAR,
    premultiply_alpha: bool = True,
) -> np.ndarray | None:
    """Return a scaled image tensor.

    Args:
        image: The bitmap to scale.
        size: ``(width, height)`` the model was trained on. Fractional
            sizes are truncated to whole pixels.
        components_count: Number of colour components kept per pixel.
        batch_size: Number of copies of the image along the first axis.
        is_quantized: Indicates whether the model uses quantization. If
            False, ``(value - mean) / std`` is applied to each sample to
            convert it from the uint8 range [0, 255] to float32 [-1, 1].
        resampling: Interpolation used when resizing.
        premultiply_alpha: Whether colour is multiplied by alpha first.

    Returns:
        An array of shape ``(batch_size, height, width, components_count)``
        or ``None`` if the image could not be scaled.

    Raises:
        InvalidOptionsError: If size, components or batch are not positive.

    """
    options = ScalingOptions(
        width=size[0],
        height=size[1],
        components_count=components_count,
        batch_size=batch_size,
        is_quantized=is_quantized,
        resampling=resampling,
        premultiply_alpha=premultiply_alpha,
    )
    return scale_image(image, options)


def scale_image(
    image: SourceImage, options: ScalingOptions
) -> np.ndarray | None:
    """Scale ``image`` as described by ``options``.

    See ``scaled_image_array`` for the shape and dtype of the result.
    """
    drawn = _draw(image, options)
    if drawn is None or options.is_quantized:
        return drawn
    return normalize_pixels(drawn)
