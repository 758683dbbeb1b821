"""A bounded first-in, first-out queue."""

from collections import deque

DEFAULT_SIZE = 50


class QueueFullError(Exception):
    """Raised when pushing onto a queue that holds its maximum number of items."""


class QueueEmptyError(Exception):
    """Raised when popping from a queue that holds no items."""


class BoundedQueue:
    """A FIFO queue holding at most ``max_size`` payloads.

    A size that is not positive selects the default size of 50.
    """

    def __init__(self, size=0):
        self.max_size = size if size > 0 else DEFAULT_SIZE
        self._items = deque()

    def is_empty(self):
        """Return True when the queue holds no payloads."""
        return not self._items

    def is_full(self):
        """Return True when the queue holds ``max_size`` payloads."""
        return len(self._items) >= self.max_size

    def push(self, payload):
        """Add a payload at the end of the queue."""
        if self.is_full():
            raise QueueFullError(f"queue is full ({self.max_size} items)")
        self._items.append(payload)

    def pop(self):
        """Remove and return the payload at the front of the queue."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def clear(self):
        """Discard every payload in the queue."""
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"BoundedQueue(size={self.max_size}, items={len(self._items)})"