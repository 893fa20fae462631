"""Physical frames — the simulated RAM.

Physical memory is divided into fixed-size **frames**, the physical
counterpart of logical pages.  With ``memory_size`` bytes and
``page_size``-byte pages there are ``memory_size // page_size`` frames,
and each one holds at most one page at a time.

The frame store does not decide *which* frame a page goes to — that is
the paging engine's job.  It only stores what it is told to store and
reports what each slot holds.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """A logical page, identified only by its number."""

    page_number: int

    def __str__(self) -> str:
        """Format as ``Page n``."""
        return f"Page {self.page_number}"


@dataclass(frozen=True)
class FrameSnapshot:
    """Occupancy of one frame at a point in time."""

    frame_number: int
    page_number: int | None

    @property
    def is_empty(self) -> bool:
        """Return True if no page is loaded in this frame."""
        return self.page_number is None

    def __str__(self) -> str:
        """Format as ``Frame f: Page p`` or ``Frame f: Empty``."""
        if self.page_number is None:
            return f"Frame {self.frame_number}: Empty"
        return f"Frame {self.frame_number}: Page {self.page_number}"


class Frame:
    """A single physical frame slot."""

    def __init__(self, frame_number: int) -> None:
        """Create an empty frame."""
        self.frame_number = frame_number
        self.page: Page | None = None

    def load(self, page: Page) -> None:
        """Put a page in this frame, replacing whatever was there."""
        self.page = page

    def snapshot(self) -> FrameSnapshot:
        """Return a read-only view of this frame."""
        page_number = self.page.page_number if self.page is not None else None
        return FrameSnapshot(frame_number=self.frame_number, page_number=page_number)


class FrameStore:
    """Fixed pool of physical frames.

    Args:
        capacity: Number of frames; fixed for the lifetime of the store.

    """

    def __init__(self, *, capacity: int) -> None:
        """Create a store of empty frames numbered ``0..capacity-1``."""
        self._frames = [Frame(i) for i in range(capacity)]

    @property
    def capacity(self) -> int:
        """Return the total number of frames."""
        return len(self._frames)

    @property
    def occupied(self) -> int:
        """Return the number of frames currently holding a page."""
        return sum(1 for frame in self._frames if frame.page is not None)

    def _frame(self, frame_number: int) -> Frame:
        if not 0 <= frame_number < len(self._frames):
            msg = f"Frame {frame_number} outside physical memory (0..{len(self._frames) - 1})"
            raise IndexError(msg)
        return self._frames[frame_number]

    def place(self, frame_number: int, page: Page) -> None:
        """Store a page in a frame, overwriting any prior occupant.

        The caller must already have invalidated the prior occupant's
        page table entry.

        Raises:
            IndexError: If the frame number is out of range.

        """
        self._frame(frame_number).load(page)

    def describe(self, frame_number: int) -> FrameSnapshot:
        """Return the occupancy of one frame.

        Raises:
            IndexError: If the frame number is out of range.

        """
        return self._frame(frame_number).snapshot()

    def snapshot(self) -> list[FrameSnapshot]:
        """Return the occupancy of every frame in index order."""
        return [frame.snapshot() for frame in self._frames]
