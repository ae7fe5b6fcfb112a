"""Blocks that move sample chunks between a stream and a thread-safe queue."""

from __future__ import annotations

import queue


class ChannelClosed(Exception):
    """The sending side has closed and every chunk it sent has been delivered."""


class Closed:
    """Marker put on a queue by the sending side: no more chunks follow."""

    def __repr__(self):
        return "Closed()"


def _is_closed(item):
    return item is Closed or isinstance(item, Closed)


class _ChunkCursor:
    """The chunk currently being emitted and how far into it we are."""

    def __init__(self):
        self._chunk = None
        self._index = 0

    @property
    def pending(self):
        return self._chunk is not None

    @property
    def remaining(self):
        return 0 if self._chunk is None else len(self._chunk) - self._index

    def load(self, chunk):
        chunk = list(chunk)
        if chunk:
            self._chunk = chunk
            self._index = 0

    def take(self, capacity):
        """Return up to ``capacity`` items, releasing the chunk once it is used up."""
        if self._chunk is None or capacity <= 0:
            return []
        end = min(len(self._chunk), self._index + capacity)
        items = self._chunk[self._index:end]
        self._index = end
        if self._index == len(self._chunk):
            self._chunk = None
            self._index = 0
        return items


class ChannelSink:
    """Push each batch of incoming samples onto a queue as one list.

    Sending never blocks: a batch that does not fit into a full queue is dropped.
    """

    def __init__(self, sender):
        self._sender = sender
        self.finished = False

    def work(self, samples, finished=False):
        """Send ``samples`` as one chunk; return how many samples were consumed."""
        chunk = list(samples)
        if chunk:
            try:
                self._sender.put_nowait(chunk)
            except queue.Full:
                pass
        if finished:
            self.finished = True
        return len(chunk)


class ChannelSource:
    """Emit samples from chunks taken off a queue.

    The sending side closes the stream by putting a :class:`Closed` marker on the queue.
    """

    def __init__(self, receiver):
        self._receiver = receiver
        self._cursor = _ChunkCursor()
        self.finished = False
        self.call_again = False

    def work(self, capacity):
        """Return up to ``capacity`` samples without blocking.

        Raises :class:`ChannelClosed` once the sender has closed and nothing is pending.
        """
        if self.finished:
            raise ChannelClosed()
        if capacity <= 0:
            return []
        if not self._cursor.pending:
            try:
                item = self._receiver.get_nowait()
            except queue.Empty:
                item = None
            else:
                if _is_closed(item):
                    self.finished = True
                    raise ChannelClosed()
                self._cursor.load(item)
        items = self._cursor.take(capacity)
        self.call_again = not self._cursor.pending
        return items

    def drain(self, limit=None):
        """Collect samples, waiting for chunks, until ``limit`` is reached or the sender closes."""
        out = []
        while limit is None or len(out) < limit:
            if self.finished:
                break
            if not self._cursor.pending:
                item = self._receiver.get()
                if _is_closed(item):
                    self.finished = True
                    break
                self._cursor.load(item)
                continue
            want = self._cursor.remaining if limit is None else limit - len(out)
            out.extend(self._cursor.take(want))
        self.call_again = not self._cursor.pending
        return out