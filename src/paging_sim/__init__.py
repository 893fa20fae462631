"""Demand-paging simulator — page table, frames, and FIFO replacement.

Re-exports public symbols so callers can write::

    from paging_sim import PagingEngine, SimulationConfig
"""

from paging_sim.config import DEFAULT_MEMORY_SIZE, ConstructionInvalidError, SimulationConfig
from paging_sim.engine import (
    AccessOutcome,
    AccessStats,
    AddressOutOfBoundsError,
    PagingEngine,
    TranslationResult,
)
from paging_sim.frames import Frame, FrameSnapshot, FrameStore, Page
from paging_sim.page_table import PageTable, PageTableEntry
from paging_sim.replacement import FIFOQueue

__all__ = [
    "DEFAULT_MEMORY_SIZE",
    "AccessOutcome",
    "AccessStats",
    "AddressOutOfBoundsError",
    "ConstructionInvalidError",
    "FIFOQueue",
    "Frame",
    "FrameSnapshot",
    "FrameStore",
    "Page",
    "PageTable",
    "PageTableEntry",
    "PagingEngine",
    "SimulationConfig",
    "TranslationResult",
]
