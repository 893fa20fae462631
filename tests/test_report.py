"""Tests for result and snapshot formatting."""

from paging_sim.engine import AddressOutOfBoundsError, PagingEngine
from paging_sim.logging import Logger, LogLevel
from paging_sim.report import (
    format_load_order,
    format_memory,
    format_narrative,
    format_page_table,
    format_stats,
    narrate,
    narrate_error,
    record_access,
)


def _full_engine() -> PagingEngine:
    """Create a 4-frame engine with pages 0-3 loaded."""
    engine = PagingEngine(page_size=4, memory_size=16, number_of_pages=8)
    for address in (1, 4, 9, 12):
        engine.access(address)
    return engine


class TestNarrate:
    """Verify the per-access narrative."""

    def test_hit_narrative(self) -> None:
        """A hit should describe the lookup and the physical location."""
        engine = _full_engine()
        text = format_narrative(engine.access(13))
        assert text.splitlines() == [
            "Accessing Logical Address 13",
            "Dividing the address: Page 3, Offset 1",
            "Page 3 is in memory at Frame 3",
            "Accessing physical memory location (Frame 3, Offset 1)",
        ]

    def test_fault_with_free_frame(self) -> None:
        """A fault into a free frame should not mention replacement."""
        engine = PagingEngine(page_size=4, memory_size=16, number_of_pages=8)
        text = format_narrative(engine.access(9))
        assert "Page Fault! Page 2 is not in memory." in text
        assert "Page 2 loaded into Frame 0" in text
        assert "Replacing" not in text

    def test_fault_with_eviction(self) -> None:
        """A fault on full memory should name the victim and its frame."""
        engine = _full_engine()
        text = format_narrative(engine.access(20))
        assert "Replacing Page 0 from Frame 0 with Page 5" in text

    def test_fault_lines_are_warnings(self) -> None:
        """Fault handling lines should be logged at WARNING."""
        engine = _full_engine()
        lines = narrate(engine.access(20))
        warnings = [text for level, text in lines if level is LogLevel.WARNING]
        assert len(warnings) == 3
        assert all(level is LogLevel.INFO for level, _ in narrate(engine.access(20)))

    def test_narrate_error(self) -> None:
        """Rejected addresses should produce the error message."""
        error = AddressOutOfBoundsError(40, 32)
        assert narrate_error(error) == "Error: Logical address 40 exceeds process size."

    def test_record_access_tags_address(self) -> None:
        """Recorded lines should carry the source and logical address."""
        logger = Logger()
        engine = _full_engine()
        record_access(logger, engine.access(8), source="console")
        assert len(logger) == 4
        assert all(e.address == 8 and e.source == "console" for e in logger.entries)


class TestTables:
    """Verify memory, page table, queue, and stats rendering."""

    def test_format_memory(self) -> None:
        """Memory should list each frame with its page or Empty."""
        engine = PagingEngine(page_size=4, memory_size=16, number_of_pages=8)
        engine.access(5)
        assert format_memory(engine.frames()).splitlines() == [
            "Current Memory State:",
            "Frame 0: Page 1",
            "Frame 1: Empty",
            "Frame 2: Empty",
            "Frame 3: Empty",
        ]

    def test_format_page_table(self) -> None:
        """The page table should show resident and missing pages."""
        engine = PagingEngine(page_size=4, memory_size=16, number_of_pages=2)
        engine.access(5)
        assert format_page_table(engine.page_table_entries()).splitlines() == [
            "Page Table:",
            "Page 0 -> Not loaded in memory",
            "Page 1 -> Frame 0",
        ]

    def test_format_load_order(self) -> None:
        """The queue should read oldest first."""
        assert format_load_order([2, 0, 5]) == "FIFO queue: 2 <- 0 <- 5"
        assert format_load_order([]) == "FIFO queue: (empty)"

    def test_format_stats(self) -> None:
        """Stats should show counts and the fault rate as a percentage."""
        engine = _full_engine()
        engine.access(1)
        text = format_stats(engine.stats)
        assert "Accesses:    5" in text
        assert "Page faults: 4" in text
        assert "Fault rate:  80.0%" in text
