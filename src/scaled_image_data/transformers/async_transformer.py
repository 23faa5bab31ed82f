"""Image Transformation Processing Middleware.

Abstract version of a middleware, this takes an async iterator of items and
transforms each entry using some self.transform method. Items for which
``transform`` returns ``None`` are dropped from the stream.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class AsyncTransformer(ABC, AsyncIterator[U], Generic[T, U]):
    """Base class for image processing middleware."""

    def __init__(self, source: AsyncIterator[T]) -> None:
        """Initialize with source iterator."""
        self.source = source

    @abstractmethod
    async def transform(self, data: T) -> U | None:
        """Transform a single item, or return None to skip it."""
        message = "Subclasses must implement this method"
        raise NotImplementedError(message)

    async def __anext__(self) -> U:
        """Get next transformed item, skipping items that transform to None."""
        while True:
            data = await anext(self.source)
            transformed = await self.transform(data)
            if transformed is not None:
                return transformed
