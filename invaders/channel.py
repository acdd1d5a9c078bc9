"""
Frame Channel
==============
One-directional hand-off of finished frames from the simulation
thread to the render thread.

The channel is unbounded: send() never blocks, so the simulation
never waits on the terminal. A renderer that falls behind builds
up a backlog of stale frames instead of slowing the game down.
"""

import queue
import threading

# Marks the end of the stream inside the queue
_CLOSED = object()


class ChannelClosed(Exception):
    """Raised by recv() once the channel is closed and drained."""


class FrameChannel:
    """Unbounded multi-producer/single-consumer queue of frames."""

    def __init__(self):
        self._queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._disconnected = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def connected(self) -> bool:
        """Whether a receiver is still listening."""
        return not self._disconnected

    @property
    def backlog(self) -> int:
        """Frames sent but not yet received (approximate)."""
        return self._queue.qsize()

    def send(self, frame) -> bool:
        """
        Queue a frame for the receiver.

        Ownership passes with the frame. Returns False when the channel
        is closed or the receiver has gone away; the frame is dropped.
        """
        with self._lock:
            if self._closed or self._disconnected:
                return False
            self._queue.put(frame)
            return True

    def recv(self):
        """Block until the next frame arrives."""
        if self._disconnected:
            raise ChannelClosed()
        item = self._queue.get()
        if item is _CLOSED:
            # Leave the marker for any later recv() call
            self._queue.put(_CLOSED)
            raise ChannelClosed()
        return item

    def close(self):
        """Stop accepting frames. Already-queued frames are still delivered."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)

    def disconnect(self):
        """Receiver side hang-up: further sends fail."""
        with self._lock:
            self._disconnected = True
