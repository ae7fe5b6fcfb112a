import asyncio

import pytest

from fsdrkit.async_channels import AsyncChannelSink, AsyncChannelSource
from fsdrkit.channels import ChannelClosed, Closed


@pytest.mark.asyncio
async def test_async_channel_sink_f32():
    tx = asyncio.Queue()
    orig = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
    sink = AsyncChannelSink(tx)
    assert await sink.work(orig, finished=True) == len(orig)
    assert await tx.get() == orig
    assert sink.finished is True


@pytest.mark.asyncio
async def test_async_sink_drops_batch_when_full():
    tx = asyncio.Queue(maxsize=1)
    tx.put_nowait([42])
    sink = AsyncChannelSink(tx)
    assert await sink.work([1, 2]) == 2
    assert tx.qsize() == 1
    assert tx.get_nowait() == [42]


@pytest.mark.asyncio
async def test_async_channel_source_u32():
    rx = asyncio.Queue()
    orig = [0, 1, 2]
    await rx.put(list(orig))
    await rx.put(Closed())
    source = AsyncChannelSource(rx)
    received = await source.drain(len(orig))
    assert received == orig


@pytest.mark.asyncio
async def test_async_source_splits_chunk():
    rx = asyncio.Queue()
    await rx.put([10, 20, 30])
    source = AsyncChannelSource(rx)
    assert await source.work(2) == [10, 20]
    assert source.call_again is False
    assert await source.work(2) == [30]
    assert source.call_again is True


@pytest.mark.asyncio
async def test_async_source_raises_when_closed():
    rx = asyncio.Queue()
    await rx.put([1])
    await rx.put(Closed())
    source = AsyncChannelSource(rx)
    assert await source.work(8) == [1]
    with pytest.raises(ChannelClosed):
        await source.work(8)
    assert source.finished is True
    with pytest.raises(ChannelClosed):
        await source.work(8)


@pytest.mark.asyncio
async def test_async_source_waits_for_data():
    rx = asyncio.Queue()
    source = AsyncChannelSource(rx)

    async def feed():
        await asyncio.sleep(0.01)
        await rx.put([7, 8])
        await rx.put(Closed)

    feeder = asyncio.create_task(feed())
    received = await source.drain()
    await feeder
    assert received == [7, 8]
    assert source.finished is True


@pytest.mark.asyncio
async def test_async_round_trip():
    q = asyncio.Queue()
    sink = AsyncChannelSink(q)
    await sink.work([1, 2])
    await sink.work([3])
    q.put_nowait(Closed())
    assert await AsyncChannelSource(q).drain() == [1, 2, 3]