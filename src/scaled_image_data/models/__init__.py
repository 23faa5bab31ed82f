"""Package containing the image models used by the scaling functions.

``ImageData`` carries encoded bytes through a streaming pipeline while
``SourceImage`` is the decoded bitmap that the conversion functions read.
"""

from .image_data import ImageData
from .source_image import SourceImage

__all__ = ["ImageData", "SourceImage"]
