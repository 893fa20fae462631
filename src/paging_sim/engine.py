"""Paging engine — address translation with demand paging.

Every access goes through the same steps the MMU and the kernel's
fault handler perform together:

    1. **Bounds check** — the address must lie inside the process.
    2. **Decompose** — ``page = address // page_size``,
       ``offset = address % page_size``.
    3. **Look up** — if the page table says the page is resident, the
       translation is a **hit** and we are done.
    4. **Fault** — otherwise pick a frame (the next free one, or the
       frame of the oldest-loaded page under FIFO), load the page, and
       translate again.  The second lookup always hits.

Frames are handed out in increasing index order while any are free,
so the free frame is always ``frames[len(fifo)]``.  Once memory is
full, every fault evicts exactly one page.

Design choices:
    - **Results, not prints.**  ``access()`` returns a frozen
      ``TranslationResult``; presentation layers format it.
    - **Retry is a loop**, bounded to two passes, not a recursive call.
    - **Out-of-range addresses raise** ``AddressOutOfBoundsError``
      before anything is touched, so a rejected access leaves the
      engine exactly as it was.
"""

from dataclasses import dataclass
from enum import StrEnum

from paging_sim.config import SimulationConfig
from paging_sim.frames import FrameSnapshot, FrameStore, Page
from paging_sim.page_table import PageTable, PageTableEntry
from paging_sim.replacement import FIFOQueue

# Decode, fault, decode again.
_MAX_TRANSLATION_PASSES = 2


class AddressOutOfBoundsError(Exception):
    """Raised when a logical address lies outside the process."""

    def __init__(self, address: int, limit: int) -> None:
        """Record the rejected address and the process size."""
        self.address = address
        self.limit = limit
        super().__init__(f"Logical address {address} exceeds process size ({limit} bytes)")


class AccessOutcome(StrEnum):
    """Whether an access found its page resident."""

    HIT = "hit"
    FAULT = "fault"


@dataclass(frozen=True)
class TranslationResult:
    """The outcome of translating one logical address.

    Attributes:
        logical_address: The address that was accessed.
        page_number: ``logical_address // page_size``.
        offset: ``logical_address % page_size``.
        frame_number: The frame the page is resident in after the access.
        outcome: HIT if the page was already resident, FAULT otherwise.
        evicted_page: The page replaced to make room, if any.
        page_size: Bytes per page, for computing the physical address.

    """

    logical_address: int
    page_number: int
    offset: int
    frame_number: int
    outcome: AccessOutcome
    evicted_page: int | None = None
    page_size: int = 1

    @property
    def is_hit(self) -> bool:
        """Return True if no page fault occurred."""
        return self.outcome is AccessOutcome.HIT

    @property
    def is_fault(self) -> bool:
        """Return True if the access caused a page fault."""
        return self.outcome is AccessOutcome.FAULT

    @property
    def physical_address(self) -> int:
        """Return ``frame_number * page_size + offset``."""
        return self.frame_number * self.page_size + self.offset


@dataclass(frozen=True)
class AccessStats:
    """Counters accumulated over the engine's lifetime."""

    accesses: int = 0
    hits: int = 0
    faults: int = 0
    evictions: int = 0

    @property
    def fault_rate(self) -> float:
        """Return faults / accesses (0.0 before any access)."""
        if self.accesses == 0:
            return 0.0
        return self.faults / self.accesses


class PagingEngine:
    """Demand-paged address translation for one simulated process.

    The engine exclusively owns its page table, frame store, and FIFO
    queue.  They are only changed by loading a page on a fault and by
    evicting a victim to make room.

    Args:
        page_size: Bytes per page and per frame.
        memory_size: Bytes of physical memory (a multiple of page_size).
        number_of_pages: Pages in the logical address space.

    Raises:
        ConstructionInvalidError: If the sizes are invalid.

    """

    def __init__(self, *, page_size: int, memory_size: int, number_of_pages: int) -> None:
        """Create an engine with every page unmapped and every frame empty."""
        self._config = SimulationConfig(
            page_size=page_size,
            memory_size=memory_size,
            number_of_pages=number_of_pages,
        )
        self._page_table = PageTable(number_of_pages=number_of_pages)
        self._frames = FrameStore(capacity=self._config.frame_count)
        self._fifo = FIFOQueue()
        self._hits = 0
        self._faults = 0
        self._evictions = 0

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "PagingEngine":
        """Create an engine from a validated config."""
        return cls(
            page_size=config.page_size,
            memory_size=config.memory_size,
            number_of_pages=config.number_of_pages,
        )

    # -- Sizes ---------------------------------------------------------------

    @property
    def config(self) -> SimulationConfig:
        """Return the sizes this engine was built with."""
        return self._config

    @property
    def page_size(self) -> int:
        """Return the page size in bytes."""
        return self._config.page_size

    @property
    def memory_size(self) -> int:
        """Return the physical memory size in bytes."""
        return self._config.memory_size

    @property
    def number_of_pages(self) -> int:
        """Return the number of logical pages."""
        return self._config.number_of_pages

    @property
    def frame_count(self) -> int:
        """Return the number of physical frames."""
        return self._frames.capacity

    @property
    def process_size(self) -> int:
        """Return the first invalid logical address."""
        return self._config.process_size

    # -- Translation ---------------------------------------------------------

    def access(self, logical_address: int) -> TranslationResult:
        """Translate a logical address, faulting the page in if needed.

        Args:
            logical_address: Address within the process, ``0 <= a < process_size``.

        Returns:
            The translation, marked HIT or FAULT.

        Raises:
            AddressOutOfBoundsError: If the address is outside the process.
            TypeError: If the address is not an int (bools are rejected too).

        """
        if isinstance(logical_address, bool) or not isinstance(logical_address, int):
            msg = f"Logical address must be an integer, got {logical_address!r}"
            raise TypeError(msg)
        if not 0 <= logical_address < self.process_size:
            raise AddressOutOfBoundsError(logical_address, self.process_size)

        outcome = AccessOutcome.HIT
        evicted: int | None = None
        for _ in range(_MAX_TRANSLATION_PASSES):
            page_number = logical_address // self.page_size
            offset = logical_address % self.page_size
            if self._page_table.is_resident(page_number):
                if outcome is AccessOutcome.HIT:
                    self._hits += 1
                return TranslationResult(
                    logical_address=logical_address,
                    page_number=page_number,
                    offset=offset,
                    frame_number=self._page_table.frame_of(page_number),
                    outcome=outcome,
                    evicted_page=evicted,
                    page_size=self.page_size,
                )
            outcome = AccessOutcome.FAULT
            self._faults += 1
            evicted = self.handle_fault(page_number)

        msg = f"Page for address {logical_address} still not resident after fault handling"
        raise RuntimeError(msg)

    def handle_fault(self, page_number: int) -> int | None:
        """Load a page into a frame, evicting the oldest page if memory is full.

        Args:
            page_number: The page that faulted.

        Returns:
            The evicted page number, or None if a free frame was used
            (or the page was already resident).

        Raises:
            IndexError: If the page number is out of range.

        """
        if self._page_table.is_resident(page_number):
            return None
        if len(self._fifo) < self._frames.capacity:
            self._load(page_number, len(self._fifo))
            return None

        victim = self._fifo.pop_victim()
        frame_number = self._page_table.frame_of(victim)
        self._page_table.invalidate(victim)
        self._evictions += 1
        self._load(page_number, frame_number)
        return victim

    def _load(self, page_number: int, frame_number: int) -> None:
        self._frames.place(frame_number, Page(page_number))
        self._page_table.assign(page_number, frame_number)
        self._fifo.add_page(page_number)

    # -- Introspection -------------------------------------------------------

    def frames(self) -> list[FrameSnapshot]:
        """Return the occupancy of every frame."""
        return self._frames.snapshot()

    def page_table_entries(self) -> list[PageTableEntry]:
        """Return every page table row."""
        return self._page_table.entries()

    def load_order(self) -> list[int]:
        """Return resident pages, oldest load first (next victim at index 0)."""
        return self._fifo.pages()

    def is_resident(self, page_number: int) -> bool:
        """Return True if the page is currently in a frame."""
        return self._page_table.is_resident(page_number)

    @property
    def stats(self) -> AccessStats:
        """Return hit, fault, and eviction counters."""
        return AccessStats(
            accesses=self._hits + self._faults,
            hits=self._hits,
            faults=self._faults,
            evictions=self._evictions,
        )
