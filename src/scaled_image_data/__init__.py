"""Scaled Image Data.

Resize camera and photo images into the flat pixel buffers and normalized
tensors expected by machine-learning models.
"""

from scaled_image_data.exceptions import (
    ImageDecodeError,
    InvalidImageError,
    InvalidOptionsError,
    ScaledImageError,
)
from scaled_image_data.models import ImageData, SourceImage
from scaled_image_data.options import ScalingOptions
from scaled_image_data.transformers.core import (
    ResamplingAlgorithm,
    normalize_pixels,
    scale_image,
    scaled_image_array,
    scaled_image_data,
)

__all__ = [
    "ImageData",
    "ImageDecodeError",
    "InvalidImageError",
    "InvalidOptionsError",
    "ResamplingAlgorithm",
    "ScaledImageError",
    "ScalingOptions",
    "SourceImage",
    "normalize_pixels",
    "scale_image",
    "scaled_image_array",
    "scaled_image_data",
]
