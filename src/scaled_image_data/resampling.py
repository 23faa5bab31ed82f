"""Resampling algorithms available when resizing a bitmap."""

import enum

import cv2 as cv


class ResamplingAlgorithm(enum.Enum):
    """Open CV Resampling Configuration.

    Enum for ease of configuration and type-safety when selecting OpenCV
    resampling algorithms.
    """

    NEAREST = cv.INTER_NEAREST
    BOX = cv.INTER_AREA
    BILINEAR = cv.INTER_LINEAR
    LANCZOS = cv.INTER_LANCZOS4
