"""Per-request batching and caching of single-key lookups."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Generic, Hashable, Iterable, List, Optional, Sequence, TypeVar


logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

BatchFn = Callable[[List[K]], Awaitable[Sequence[Optional[V]]]]


class BatchLoader(Generic[K, V]):
    """Coalesce ``load`` calls into one ``batch_fn`` call per event-loop pass.

    The first ``load`` of an unseen key queues it and schedules :meth:`dispatch`
    with ``loop.call_soon``; every other ``load`` issued before the loop gets
    to that callback joins the same batch. ``batch_fn`` receives the distinct
    queued keys and must return one value (or ``None``) per key, in order.

    Results are memoized by key for the loader's lifetime and never evicted,
    so a loader must not outlive the request it was created for.
    """

    def __init__(self, batch_fn: BatchFn[K, V], *, name: str = "loader"):
        self._batch_fn = batch_fn
        self.name = name
        self._cache: Dict[K, asyncio.Future] = {}
        self._queue: List[K] = []
        self._flush_scheduled = False
        self._dispatches: set[asyncio.Task] = set()
        self.dispatch_count = 0

    def load(self, key: K) -> "asyncio.Future[Optional[V]]":
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        self._cache[key] = future
        self._queue.append(key)
        if not self._flush_scheduled:
            self._flush_scheduled = True
            loop.call_soon(self._start_dispatch, loop)
        return future

    async def load_many(self, keys: Iterable[K]) -> List[Optional[V]]:
        return list(await asyncio.gather(*(self.load(key) for key in keys)))

    def _start_dispatch(self, loop: asyncio.AbstractEventLoop) -> None:
        self._flush_scheduled = False
        if not self._queue:
            return
        task = loop.create_task(self.dispatch())
        self._dispatches.add(task)
        task.add_done_callback(self._dispatches.discard)

    async def dispatch(self) -> None:
        """Flush the queued keys through ``batch_fn`` and settle their futures."""

        keys, self._queue = self._queue, []
        if not keys:
            return

        self.dispatch_count += 1
        logger.debug("Dispatching %s batch of %d key(s)", self.name, len(keys))
        try:
            values = list(await self._batch_fn(keys))
        except Exception as exc:
            self._fail(keys, exc)
            return

        if len(values) != len(keys):
            self._fail(
                keys,
                ValueError(
                    f"{self.name} batch function returned {len(values)} values for {len(keys)} keys"
                ),
            )
            return

        for key, value in zip(keys, values):
            future = self._cache[key]
            if not future.done():
                future.set_result(value)

    def _fail(self, keys: Sequence[K], exc: BaseException) -> None:
        logger.debug("%s batch of %d key(s) failed: %s", self.name, len(keys), exc)
        for key in keys:
            future = self._cache[key]
            if not future.done():
                future.set_exception(exc)
