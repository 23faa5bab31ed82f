"""Tests for SourceImage construction."""

import numpy as np
import pytest
from PIL import Image

from scaled_image_data.exceptions import ImageDecodeError, InvalidImageError
from scaled_image_data.models import SourceImage
from tests.utils.image_generation import (
    create_gradient,
    create_test_image,
    create_test_image_from_array,
)


def test_from_array_geometry() -> None:
    """Test that width, height and components follow the array shape."""
    image = SourceImage(np.zeros((30, 40, 4), dtype=np.uint8))

    assert image.width == 40
    assert image.height == 30
    assert image.components_count == 4
    assert image.bytes_per_row == 160
    assert image.has_alpha


def test_two_dimensional_array_is_single_channel() -> None:
    image = SourceImage(np.zeros((5, 6), dtype=np.uint8))

    assert image.pixels.shape == (5, 6, 1)
    assert image.components_count == 1
    assert not image.has_alpha


def test_zero_width_array_is_accepted() -> None:
    """Test that an empty bitmap can be represented."""
    image = SourceImage(np.zeros((5, 0, 3), dtype=np.uint8))

    assert image.width == 0
    assert image.height == 5


@pytest.mark.parametrize(
    "pixels",
    [
        np.zeros((4, 4, 3), dtype=np.float32),
        np.zeros((4,), dtype=np.uint8),
        np.zeros((4, 4, 5), dtype=np.uint8),
        [[0, 0], [0, 0]],
    ],
)
def test_invalid_arrays_are_rejected(pixels: object) -> None:
    with pytest.raises(InvalidImageError):
        SourceImage(pixels)  # type: ignore[arg-type]


def test_non_contiguous_array_is_copied() -> None:
    """Test that strided views are stored contiguously."""
    base = create_gradient(8, 8, 3)
    image = SourceImage(base[:, ::2])

    assert image.pixels.flags["C_CONTIGUOUS"]
    assert np.array_equal(image.pixels, base[:, ::2])


@pytest.mark.parametrize(
    ("mode", "expected_components"),
    [("L", 1), ("LA", 2), ("RGB", 3), ("RGBA", 4)],
)
def test_from_pil_direct_modes(mode: str, expected_components: int) -> None:
    image = SourceImage.from_pil(Image.new(mode, (7, 3)))

    assert image.width == 7
    assert image.height == 3
    assert image.components_count == expected_components


def test_from_pil_palette_without_transparency_is_rgb() -> None:
    palette_image = Image.new("RGB", (4, 4), (10, 20, 30)).convert(
        "P", palette=Image.Palette.ADAPTIVE
    )

    image = SourceImage.from_pil(palette_image)

    assert image.components_count == 3
    assert tuple(image.pixels[0, 0]) == (10, 20, 30)


def test_from_pil_palette_with_transparency_is_rgba() -> None:
    palette_image = Image.new("RGB", (4, 4), (10, 20, 30)).convert(
        "P", palette=Image.Palette.ADAPTIVE
    )
    palette_image.info["transparency"] = palette_image.getpixel((0, 0))

    image = SourceImage.from_pil(palette_image)

    assert image.components_count == 4
    assert image.pixels[0, 0, 3] == 0


def test_from_bytes_decodes_png() -> None:
    data = create_test_image(12, 9, mode="RGBA", color=(1, 2, 3, 4))

    image = SourceImage.from_bytes(data)

    assert (image.width, image.height) == (12, 9)
    assert tuple(image.pixels[0, 0]) == (1, 2, 3, 4)


def test_from_bytes_raw_buffer() -> None:
    """Test that raw interleaved pixels are wrapped without decoding."""
    pixels = create_gradient(5, 4, 3)

    image = SourceImage.from_bytes(pixels.tobytes(), size=(5, 4))

    assert image.components_count == 3
    assert np.array_equal(image.pixels, pixels)


def test_from_bytes_raw_buffer_with_explicit_components() -> None:
    pixels = create_gradient(2, 3, 4)

    image = SourceImage.from_bytes(
        pixels.tobytes(), size=(2, 3), components_count=4
    )

    assert image.has_alpha
    assert np.array_equal(image.pixels, pixels)


def test_from_bytes_without_signature_or_size_fails() -> None:
    with pytest.raises(ImageDecodeError):
        SourceImage.from_bytes(b"not_a_valid_image")


def test_from_bytes_raw_length_mismatch_fails() -> None:
    with pytest.raises(ImageDecodeError):
        SourceImage.from_bytes(b"\x01" * 10, size=(2, 2))


def test_from_bytes_raw_components_mismatch_fails() -> None:
    with pytest.raises(ImageDecodeError):
        SourceImage.from_bytes(b"\x01" * 12, size=(2, 2), components_count=4)


def test_from_bytes_corrupt_image_fails() -> None:
    """Test that a valid signature followed by garbage is a decode error."""
    with pytest.raises(ImageDecodeError):
        SourceImage.from_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 100)


def test_sixteen_bit_grayscale_png_keeps_one_component() -> None:
    """Test that 16-bit samples are scaled down to their high byte."""
    data = create_test_image_from_array(np.full((4, 4), 60000, np.uint16))

    image = SourceImage.from_bytes(data)

    assert image.components_count == 1
    assert not image.has_alpha
    assert np.all(image.pixels == 60000 >> 8)


@pytest.mark.parametrize(
    ("mode", "value", "expected"),
    [
        ("I", 0x1234, 0x12),
        ("I", 70000, 0xFF),
        ("I;16", 0xABCD, 0xAB),
        ("F", 99.6, 100),
        ("F", -3.0, 0),
        ("1", 1, 255),
    ],
)
def test_single_band_modes_become_grayscale(
    mode: str, value: float, expected: int
) -> None:
    image = SourceImage.from_pil(Image.new(mode, (3, 2), value))

    assert image.pixels.shape == (2, 3, 1)
    assert np.all(image.pixels == expected)


@pytest.mark.parametrize(
    "name",
    ["width", "height", "components_count", "bytes_per_row", "has_alpha"],
)
def test_geometry_properties_are_documented(name: str) -> None:
    """Test that every geometry property shows up in the API docs."""
    prop = getattr(SourceImage, name)

    assert isinstance(prop, property)
    assert prop.__doc__
