"""Blocks that move sample chunks between a stream and an asyncio queue."""

from __future__ import annotations

import asyncio

from fsdrkit.channels import ChannelClosed, _ChunkCursor, _is_closed


class AsyncChannelSink:
    """Push each batch of incoming samples onto an asyncio queue as one list.

    Sending never waits: a batch that does not fit into a full queue is dropped.
    """

    def __init__(self, sender):
        self._sender = sender
        self.finished = False

    async def work(self, samples, finished=False):
        """Send ``samples`` as one chunk; return how many samples were consumed."""
        chunk = list(samples)
        if chunk:
            try:
                self._sender.put_nowait(chunk)
            except asyncio.QueueFull:
                pass
        if finished:
            self.finished = True
        return len(chunk)


class AsyncChannelSource:
    """Emit samples from chunks received on an asyncio queue.

    The sending side closes the stream by putting a ``Closed`` marker on the queue.
    """

    def __init__(self, receiver):
        self._receiver = receiver
        self._cursor = _ChunkCursor()
        self.finished = False
        self.call_again = False

    async def _receive(self):
        item = await self._receiver.get()
        if _is_closed(item):
            self.finished = True
            return False
        self._cursor.load(item)
        return True

    async def work(self, capacity):
        """Return up to ``capacity`` samples, waiting for a chunk if none is pending.

        Raises :class:`ChannelClosed` once the sender has closed and nothing is pending.
        """
        if self.finished:
            raise ChannelClosed()
        if capacity <= 0:
            return []
        if not self._cursor.pending and not await self._receive():
            raise ChannelClosed()
        items = self._cursor.take(capacity)
        self.call_again = not self._cursor.pending
        return items

    async def drain(self, limit=None):
        """Collect samples until ``limit`` is reached or the sender closes."""
        out = []
        while limit is None or len(out) < limit:
            if self.finished:
                break
            if not self._cursor.pending:
                await self._receive()
                continue
            want = self._cursor.remaining if limit is None else limit - len(out)
            out.extend(self._cursor.take(want))
        self.call_again = not self._cursor.pending
        return out