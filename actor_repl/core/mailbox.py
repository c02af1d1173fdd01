"""Mailbox implementation for actors with backpressure support."""

import asyncio
from typing import Any

from ..errors import RecvError, SendError


class Mailbox:
    """
    Bounded mailbox queue for actors with backpressure support.

    Many sending handles, one receiver. The mailbox counts the sending
    handles attached to it: once all of them are detached and the buffer is
    drained, get() raises RecvError. Once the receiver closes the mailbox,
    put() raises SendError, including for senders already blocked on a full
    buffer. Cancelling a pending get() never loses a message.
    """

    def __init__(self, maxsize: int = 1):
        """
        Initialize mailbox.

        Args:
            maxsize: Maximum number of buffered messages, at least 1

        Raises:
            ValueError: If maxsize is below 1
        """
        if maxsize < 1:
            raise ValueError(f"mailbox capacity must be at least 1, got {maxsize}")
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._maxsize = maxsize
        self._senders = 0
        self._ever_attached = False
        self._closed = False
        self._arrived = asyncio.Event()
        self._receiver_gone = asyncio.Event()

    @property
    def maxsize(self) -> int:
        """Get buffer capacity."""
        return self._maxsize

    @property
    def senders(self) -> int:
        """Number of open sending handles."""
        return self._senders

    @property
    def closed(self) -> bool:
        """Whether the receiver has closed the mailbox."""
        return self._closed

    def attach(self) -> None:
        """Register a new sending handle."""
        self._senders += 1
        self._ever_attached = True

    def detach(self) -> None:
        """Unregister a sending handle; wakes the receiver when it was the last one."""
        if self._senders == 0:
            return
        self._senders -= 1
        if self._senders == 0:
            self._arrived.set()

    def close(self) -> None:
        """Close the receiving side. Pending and future puts fail."""
        if self._closed:
            return
        self._closed = True
        self._receiver_gone.set()

    def _disconnected(self) -> bool:
        return self._ever_attached and self._senders == 0

    async def _enqueue(self, message: Any) -> None:
        await self._queue.put(message)
        self._arrived.set()

    @staticmethod
    async def _race(operation, event: asyncio.Event) -> asyncio.Task:
        """Run operation until it finishes or event is set; a cancelled task means the event won."""
        op_task = asyncio.ensure_future(operation)
        event_task = asyncio.ensure_future(event.wait())
        try:
            await asyncio.wait({op_task, event_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            event_task.cancel()
            if not op_task.done():
                op_task.cancel()
                await asyncio.wait({op_task})
        return op_task

    async def put(self, message: Any) -> None:
        """
        Put a message into the mailbox.

        Blocks while the buffer is full.

        Args:
            message: Message to enqueue

        Raises:
            SendError: If the receiver closed the mailbox
        """
        if self._closed:
            raise SendError("sending on a closed mailbox", undelivered=message)

        if self._queue.full():
            put_task = await self._race(self._enqueue(message), self._receiver_gone)
            if put_task.cancelled():
                raise SendError("sending on a closed mailbox", undelivered=message)
        else:
            self._queue.put_nowait(message)
            self._arrived.set()

    async def get(self) -> Any:
        """
        Get a message from the mailbox.

        Returns:
            Next message from queue

        Raises:
            RecvError: If the mailbox is empty and every sender is gone
        """
        while self._queue.empty():
            if self._disconnected():
                raise RecvError("receiving on an empty mailbox with no senders")
            self._arrived.clear()
            await self._arrived.wait()
        return self._queue.get_nowait()

    def get_nowait(self) -> Any:
        """
        Get a message without waiting (non-blocking).

        Returns:
            Next message from queue

        Raises:
            asyncio.QueueEmpty: If queue is empty
        """
        return self._queue.get_nowait()

    def empty(self) -> bool:
        """Check if mailbox is empty."""
        return self._queue.empty()

    def full(self) -> bool:
        """Check if mailbox is full (backpressure indicator)."""
        return self._queue.full()

    def qsize(self) -> int:
        """Get current queue size."""
        return self._queue.qsize()

