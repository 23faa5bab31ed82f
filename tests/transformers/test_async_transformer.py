"""Tests for the AsyncTransformer base class."""

import pytest

from scaled_image_data.transformers.async_transformer import AsyncTransformer
from tests.utils.mock_async_iterator import MockAsyncIterator


class LengthTransformer(AsyncTransformer[bytes, int]):
    async def transform(self, data: bytes) -> int:
        return len(data)


def test_base_class_is_abstract() -> None:
    with pytest.raises(TypeError):
        AsyncTransformer(MockAsyncIterator([]))  # type: ignore[abstract]


@pytest.mark.asyncio
async def test_transforms_each_item() -> None:
    transformer = LengthTransformer(MockAsyncIterator([b"a", b"abc", b""]))

    results = [item async for item in transformer]

    assert results == [1, 3, 0]


@pytest.mark.asyncio
async def test_propagates_end_of_source() -> None:
    transformer = LengthTransformer(MockAsyncIterator([]))

    with pytest.raises(StopAsyncIteration):
        await anext(transformer)


class NonEmptyLengthTransformer(AsyncTransformer[bytes, int]):
    async def transform(self, data: bytes) -> int | None:
        return len(data) or None


@pytest.mark.asyncio
async def test_items_transformed_to_none_are_skipped() -> None:
    transformer = NonEmptyLengthTransformer(
        MockAsyncIterator([b"", b"ab", b"", b"", b"abcd", b""])
    )

    results = [item async for item in transformer]

    assert results == [2, 4]
