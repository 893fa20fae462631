"""Page table — per-page residency and frame assignment.

The page table is the record the MMU consults on every access.  For
each logical page it keeps two things:

    - a **valid bit** — is the page currently resident in a frame?
    - a **frame number** — which frame holds it (meaningful only when
      the valid bit is set).

Address translation::

    logical address  →  (page number, offset within page)
    page table[page] →  frame number (if valid, else page fault)

Design choices:
    - **Two parallel lists**, sized once from the number of pages.
      Every page has an entry from the start; nothing is created or
      destroyed after construction.
    - **Invalidate keeps the old frame number.**  It goes stale and is
      never handed out by ``entries()``, which reports ``None`` instead.
    - **Always bounds-checked.**  An out-of-range page number raises
      ``IndexError`` rather than silently wrapping (Python lists accept
      negative indices, so the check is explicit).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageTableEntry:
    """Read-only view of one page table row.

    Attributes:
        page_number: The logical page this row describes.
        resident: The valid bit.
        frame_number: The frame holding the page, or None when not resident.

    """

    page_number: int
    resident: bool
    frame_number: int | None

    def __str__(self) -> str:
        """Format as ``Page p -> Frame f`` or ``Page p -> Not loaded in memory``."""
        if self.resident:
            return f"Page {self.page_number} -> Frame {self.frame_number}"
        return f"Page {self.page_number} -> Not loaded in memory"


class PageTable:
    """Valid bits and frame numbers for every logical page of a process."""

    def __init__(self, *, number_of_pages: int) -> None:
        """Create a page table with every page initially not resident.

        Args:
            number_of_pages: Size of the logical address space in pages.

        """
        self._valid: list[bool] = [False] * number_of_pages
        self._frames: list[int] = [0] * number_of_pages

    @property
    def number_of_pages(self) -> int:
        """Return the number of logical pages."""
        return len(self._valid)

    @property
    def resident_count(self) -> int:
        """Return how many pages currently have their valid bit set."""
        return sum(self._valid)

    def _check(self, page_number: int) -> None:
        if not 0 <= page_number < len(self._valid):
            msg = f"Page {page_number} outside page table (0..{len(self._valid) - 1})"
            raise IndexError(msg)

    def is_resident(self, page_number: int) -> bool:
        """Return True if the page is loaded in a frame.

        Raises:
            IndexError: If the page number is out of range.

        """
        self._check(page_number)
        return self._valid[page_number]

    def frame_of(self, page_number: int) -> int:
        """Return the frame number recorded for a page.

        Only meaningful after ``is_resident()`` returned True; for an
        invalidated page this is the stale frame it last occupied.

        Raises:
            IndexError: If the page number is out of range.

        """
        self._check(page_number)
        return self._frames[page_number]

    def assign(self, page_number: int, frame_number: int) -> None:
        """Mark a page resident in the given frame (overwrites any prior frame)."""
        self._check(page_number)
        self._frames[page_number] = frame_number
        self._valid[page_number] = True

    def invalidate(self, page_number: int) -> None:
        """Clear the valid bit; the frame number is left as-is."""
        self._check(page_number)
        self._valid[page_number] = False

    def entries(self) -> list[PageTableEntry]:
        """Return a snapshot of every row in page-number order."""
        return [
            PageTableEntry(
                page_number=page,
                resident=valid,
                frame_number=self._frames[page] if valid else None,
            )
            for page, valid in enumerate(self._valid)
        ]

    def __len__(self) -> int:
        """Return the number of logical pages."""
        return len(self._valid)
