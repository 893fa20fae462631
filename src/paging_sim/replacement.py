"""FIFO page replacement — load-order tracking for eviction.

When every frame is occupied and a fault needs one, the paging engine
evicts the page that has been resident the longest.  FIFO only cares
about *load* time:

    - a hit does not move a page in the queue (no second chance);
    - a page that is evicted and later faults back in is a brand-new
      load and joins at the tail.

FIFO is simple but can suffer from Belady's anomaly — more frames can
mean more faults for some reference strings.
"""

from collections import deque


class FIFOQueue:
    """Resident page numbers in the order they were loaded.

    The head is always the oldest load.  A page is in the queue exactly
    while its page table valid bit is set.
    """

    def __init__(self) -> None:
        """Create an empty queue."""
        self._queue: deque[int] = deque()

    def add_page(self, page_number: int) -> None:
        """Record that a page was loaded (appended at the tail)."""
        self._queue.append(page_number)

    def pop_victim(self) -> int:
        """Remove and return the oldest loaded page.

        Raises:
            IndexError: If no pages are tracked.

        """
        if not self._queue:
            msg = "No pages to evict"
            raise IndexError(msg)
        return self._queue.popleft()

    def pages(self) -> list[int]:
        """Return the queue contents, oldest first."""
        return list(self._queue)

    def __contains__(self, page_number: object) -> bool:
        """Return True if the page is currently tracked."""
        return page_number in self._queue

    def __len__(self) -> int:
        """Return the number of resident pages."""
        return len(self._queue)
