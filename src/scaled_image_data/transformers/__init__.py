"""Conversion functions and AsyncIterable transformers."""

from scaled_image_data.transformers.async_transformer import AsyncTransformer
from scaled_image_data.transformers.core import (
    ResamplingAlgorithm,
    normalize_pixels,
    scale_image,
    scaled_image_array,
    scaled_image_data,
)
from scaled_image_data.transformers.image_scaler import ImageScaler
from scaled_image_data.transformers.tensor_batcher import TensorBatcher

__all__ = [
    "AsyncTransformer",
    "ImageScaler",
    "ResamplingAlgorithm",
    "TensorBatcher",
    "normalize_pixels",
    "scale_image",
    "scaled_image_array",
    "scaled_image_data",
]
