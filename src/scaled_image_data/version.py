"""Single point of truth for the version of the scaled_image_data package."""

import importlib.metadata

__version__ = importlib.metadata.version("scaled_image_data")
