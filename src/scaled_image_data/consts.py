"""Constants shared by the scaling functions."""

MAX_RGB_VALUE = 255.0
MEAN_RGB_VALUE = MAX_RGB_VALUE / 2.0
STD_RGB_VALUE = MAX_RGB_VALUE / 2.0

DEFAULT_WIDTH = 224
DEFAULT_HEIGHT = 224
DEFAULT_COMPONENTS_COUNT = 3
DEFAULT_BATCH_SIZE = 1
