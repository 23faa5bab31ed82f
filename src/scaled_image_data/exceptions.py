"""Base classes for all scaled image data exceptions."""


class ScaledImageError(Exception):
    """Base class for all scaled image data exceptions."""


class InvalidImageError(ScaledImageError):
    """Raised when pixel data does not describe a usable image."""

    default_message = "Pixel data must be a uint8 array of rank 2 or 3"


class ImageDecodeError(ScaledImageError):
    """Raised when image bytes cannot be decoded."""

    default_message = "Failed to decode image data"


class InvalidOptionsError(ScaledImageError):
    """Raised when scaling options are out of range."""

    default_message = "Scaling options must be positive integers"
