"""Display formatting for paging results and snapshots.

Everything here is a pure function from engine results to text, so
the console and web front ends render identically and the formatting
is testable without any I/O.

The per-access **narrative** walks through what the MMU and the fault
handler did, step by step::

    Accessing Logical Address 20
    Dividing the address: Page 5, Offset 0
    Page Fault! Page 5 is not in memory.
    Handling page fault: Loading page 5 into memory.
    Replacing Page 0 from Frame 0 with Page 5
    Page 5 loaded into Frame 0
    Page 5 is in memory at Frame 0
    Accessing physical memory location (Frame 0, Offset 0)

Each narrative line carries a log level so front ends can record it in
the event log: fault handling at WARNING, everything else at INFO.
"""

from typing import TypeAlias

from paging_sim.engine import AccessStats, AddressOutOfBoundsError, TranslationResult
from paging_sim.frames import FrameSnapshot
from paging_sim.logging import Logger, LogLevel
from paging_sim.page_table import PageTableEntry

NarrativeLine: TypeAlias = tuple[LogLevel, str]


def narrate(result: TranslationResult) -> list[NarrativeLine]:
    """Describe one access as a sequence of leveled lines.

    Args:
        result: The translation returned by ``PagingEngine.access()``.

    Returns:
        ``(level, text)`` pairs in the order the events happened.

    """
    page = result.page_number
    frame = result.frame_number
    lines: list[NarrativeLine] = [
        (LogLevel.INFO, f"Accessing Logical Address {result.logical_address}"),
        (LogLevel.INFO, f"Dividing the address: Page {page}, Offset {result.offset}"),
    ]
    if result.is_fault:
        lines.append((LogLevel.WARNING, f"Page Fault! Page {page} is not in memory."))
        lines.append(
            (LogLevel.WARNING, f"Handling page fault: Loading page {page} into memory.")
        )
        if result.evicted_page is not None:
            lines.append(
                (
                    LogLevel.WARNING,
                    f"Replacing Page {result.evicted_page} from Frame {frame} with Page {page}",
                )
            )
        lines.append((LogLevel.INFO, f"Page {page} loaded into Frame {frame}"))
    lines.append((LogLevel.INFO, f"Page {page} is in memory at Frame {frame}"))
    lines.append(
        (
            LogLevel.INFO,
            f"Accessing physical memory location (Frame {frame}, Offset {result.offset})",
        )
    )
    return lines


def narrate_error(error: AddressOutOfBoundsError) -> str:
    """Describe a rejected access."""
    return f"Error: Logical address {error.address} exceeds process size."


def record_access(logger: Logger, result: TranslationResult, *, source: str) -> None:
    """Append the narrative for one access to an event log."""
    for level, text in narrate(result):
        logger.log(level, text, source=source, address=result.logical_address)


def format_narrative(result: TranslationResult) -> str:
    """Return the narrative as plain text, one line per event."""
    return "\n".join(text for _level, text in narrate(result))


def format_memory(frames: list[FrameSnapshot]) -> str:
    """Render frame occupancy, e.g. ``Frame 0: Page 3`` / ``Frame 1: Empty``."""
    lines = ["Current Memory State:"]
    lines.extend(str(frame) for frame in frames)
    return "\n".join(lines)


def format_page_table(entries: list[PageTableEntry]) -> str:
    """Render the page table, e.g. ``Page 0 -> Frame 1``."""
    lines = ["Page Table:"]
    lines.extend(str(entry) for entry in entries)
    return "\n".join(lines)


def format_load_order(pages: list[int]) -> str:
    """Render the FIFO queue, oldest load (next victim) first."""
    if not pages:
        return "FIFO queue: (empty)"
    return "FIFO queue: " + " <- ".join(str(page) for page in pages)


def format_stats(stats: AccessStats) -> str:
    """Render access counters and the fault rate."""
    lines = [
        f"Accesses:    {stats.accesses}",
        f"Hits:        {stats.hits}",
        f"Page faults: {stats.faults}",
        f"Evictions:   {stats.evictions}",
        f"Fault rate:  {stats.fault_rate:.1%}",
    ]
    return "\n".join(lines)
