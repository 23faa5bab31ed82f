"""Stack single-image tensors into batches for batched inference."""

import asyncio
from collections.abc import AsyncIterator

import numpy as np

from scaled_image_data.exceptions import InvalidImageError


class TensorBatcher:
    """Batches ``(1, h, w, c)`` tensors into ``(n, h, w, c)`` tensors.

    The pending read from the source is kept across batches and is never
    cancelled, so a source slower than ``timeout`` delays items into the
    next batch instead of dropping them.
    """

    def __init__(
        self,
        source: AsyncIterator[np.ndarray],
        max_batch_size: int = 10,
        timeout: float = 0.1,
    ) -> None:
        """Initialize the batcher.

        Args:
            source: Iterator of tensors with a leading batch axis
            max_batch_size: Maximum number of tensors per batch
            timeout: Max seconds to wait for additional items before batching

        """
        self.source = source
        self.max_batch_size = max_batch_size
        self.timeout = timeout
        self._batch: list[np.ndarray] = []
        self._pending: asyncio.Future[np.ndarray] | None = None
        self._exhausted = False

    def __aiter__(self) -> AsyncIterator[np.ndarray]:
        """Return self as an async iterator."""
        return self

    async def __anext__(self) -> np.ndarray:
        """Get the next batched tensor."""
        # Always wait for at least one item
        if not self._batch and not self._exhausted:
            await self._fetch(timeout=None)

        # Try to get more items up to max_batch_size
        while not self._exhausted and len(self._batch) < self.max_batch_size:
            if not await self._fetch(timeout=self.timeout):
                break

        if self._batch:
            return self._create_batch()
        raise StopAsyncIteration

    async def aclose(self) -> None:
        """Cancel the outstanding read from the source, if any."""
        if self._pending is None:
            return
        pending = self._pending
        self._pending = None
        pending.cancel()
        await asyncio.gather(pending, return_exceptions=True)

    async def _next_item(self) -> np.ndarray:
        return await anext(self.source)

    async def _fetch(self, timeout: float | None) -> bool:
        """Move the next source item into the batch.

        Returns False when the read did not finish within ``timeout`` (it
        stays pending for the next call) or when the source is exhausted.
        """
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._next_item())

        done, _ = await asyncio.wait({self._pending}, timeout=timeout)
        if not done:
            return False

        pending = self._pending
        self._pending = None
        try:
            self._batch.append(pending.result())
        except StopAsyncIteration:
            self._exhausted = True
            return False
        return True

    def _create_batch(self) -> np.ndarray:
        """Concatenate the current batch along the batch axis."""
        batch = self._batch
        self._batch = []
        shapes = {item.shape[1:] for item in batch}
        if len(shapes) > 1:
            err = f"Cannot batch tensors of different shapes: {sorted(shapes)}"
            raise InvalidImageError(err)
        return np.concatenate(batch, axis=0)
