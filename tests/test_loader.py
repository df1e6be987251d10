import asyncio

import pytest

from lahmanql.loader import BatchLoader


def _recording_loader(values: dict[str, str] | None = None):
    calls: list[list[str]] = []
    values = values or {}

    async def batch(keys: list[str]) -> list[str | None]:
        calls.append(list(keys))
        return [values.get(key) for key in keys]

    return BatchLoader(batch, name="test"), calls


@pytest.mark.anyio
async def test_loads_in_same_tick_share_one_batch():
    loader, calls = _recording_loader({"a": "A", "b": "B"})

    results = await asyncio.gather(loader.load("a"), loader.load("b"), loader.load("a"), loader.load("c"))

    assert results == ["A", "B", "A", None]
    assert calls == [["a", "b", "c"]]
    assert loader.dispatch_count == 1


@pytest.mark.anyio
async def test_same_key_returns_cached_future():
    loader, calls = _recording_loader({"a": "A"})

    first = loader.load("a")
    assert loader.load("a") is first
    assert await first == "A"

    assert await loader.load("a") == "A"
    assert calls == [["a"]]


@pytest.mark.anyio
async def test_later_ticks_only_fetch_new_keys():
    loader, calls = _recording_loader({"a": "A", "b": "B"})

    assert await loader.load("a") == "A"
    assert await loader.load_many(["a", "b"]) == ["A", "B"]

    assert calls == [["a"], ["b"]]


@pytest.mark.anyio
async def test_loads_from_concurrent_coroutines_are_coalesced():
    loader, calls = _recording_loader({str(i): f"v{i}" for i in range(5)})

    async def resolve(key: str) -> str | None:
        return await loader.load(key)

    results = await asyncio.gather(*(resolve(str(i)) for i in range(5)))

    assert results == [f"v{i}" for i in range(5)]
    assert calls == [["0", "1", "2", "3", "4"]]


@pytest.mark.anyio
async def test_explicit_dispatch_flushes_queue():
    loader, calls = _recording_loader({"x": "X"})

    future = loader.load("x")
    assert not future.done()

    await loader.dispatch()
    assert future.done()
    assert future.result() == "X"

    # The scheduled flush finds nothing left to do.
    await asyncio.sleep(0)
    await loader.dispatch()
    assert calls == [["x"]]


@pytest.mark.anyio
async def test_batch_failure_rejects_every_waiter():
    async def broken(keys: list[str]) -> list[str]:
        raise RuntimeError("database down")

    loader = BatchLoader(broken, name="broken")
    first, second = loader.load("a"), loader.load("b")

    with pytest.raises(RuntimeError, match="database down"):
        await first
    with pytest.raises(RuntimeError, match="database down"):
        await second


@pytest.mark.anyio
async def test_misaligned_batch_result_is_an_error():
    async def short(keys: list[str]) -> list[str]:
        return ["only-one"]

    loader = BatchLoader(short, name="short")
    futures = [loader.load("a"), loader.load("b")]

    for future in futures:
        with pytest.raises(ValueError, match="returned 1 values for 2 keys"):
            await future
