"""Options object for the scaling functions."""

import math
import numbers
from dataclasses import dataclass

from scaled_image_data.consts import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_COMPONENTS_COUNT,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
)
from scaled_image_data.exceptions import InvalidOptionsError
from scaled_image_data.resampling import ResamplingAlgorithm


@dataclass
class ScalingOptions:
    """Options describing the input a model expects.

    Attributes:
        width: Width in pixels the image is scaled to. Fractional
            values are truncated.
            Defaults to 224.
        height: Height in pixels the image is scaled to.
            Defaults to 224.
        components_count: Number of colour components kept per pixel, e.g.
            3 for RGB. Must not exceed the components of the source image.
            Defaults to 3.
        batch_size: Number of times the image is repeated along the batch
            dimension.
            Defaults to 1.
        is_quantized: Whether the model consumes raw uint8 samples. When
            False, samples are mapped from [0, 255] to [-1, 1].
            Defaults to True.
        resampling: Interpolation used when resizing.
            Defaults to bilinear.
        premultiply_alpha: Whether colour is multiplied by alpha before
            resizing, as when drawing into a premultiplied bitmap context.
            Defaults to True.

    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    components_count: int = DEFAULT_COMPONENTS_COUNT
    batch_size: int = DEFAULT_BATCH_SIZE
    is_quantized: bool = True
    resampling: ResamplingAlgorithm = ResamplingAlgorithm.BILINEAR
    premultiply_alpha: bool = True

    def __post_init__(self) -> None:
        """Reject sizes and counts that cannot describe a tensor.

        Width and height may be real numbers and are truncated to whole
        pixels. Component and batch counts must be integers.
        """
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                err = f"{name} must be a number, got {type(value).__name__}"
                raise InvalidOptionsError(err)
            if not math.isfinite(value):
                err = f"{name} must be finite, got {value}"
                raise InvalidOptionsError(err)
            self._set_positive(name, int(value))

        for name in ("components_count", "batch_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(
                value, numbers.Integral
            ):
                err = f"{name} must be an int, got {type(value).__name__}"
                raise InvalidOptionsError(err)
            self._set_positive(name, int(value))

    def _set_positive(self, name: str, value: int) -> None:
        if value <= 0:
            err = f"{name} must be positive, got {value}"
            raise InvalidOptionsError(err)
        setattr(self, name, value)

    @property
    def size(self) -> tuple[int, int]:
        """Target ``(width, height)``."""
        return self.width, self.height
