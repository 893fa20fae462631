"""Simulation configuration — the sizes that define one simulated process.

Three numbers fix everything about a simulation:

    - ``page_size`` — bytes per page (and per frame).
    - ``memory_size`` — bytes of physical memory; divided into
      ``memory_size // page_size`` frames.
    - ``number_of_pages`` — size of the logical address space in pages.

A process is usually described by its size in bytes rather than its
page count, so ``SimulationConfig.for_process()`` rounds the process
size up to whole pages: a 30-byte process with 4-byte pages needs 8
pages.  Physical memory defaults to 16 bytes.

Invalid sizes are rejected here, at construction, rather than producing
a half-working simulation that fails on the first access.
"""

from dataclasses import dataclass

DEFAULT_MEMORY_SIZE = 16


class ConstructionInvalidError(ValueError):
    """Raised when simulation sizes are non-positive or inconsistent."""


def _require_positive(name: str, value: object) -> None:
    """Raise unless *value* is a positive int (bools don't count)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        msg = f"{name} must be a positive integer, got {value!r}"
        raise ConstructionInvalidError(msg)


@dataclass(frozen=True)
class SimulationConfig:
    """Validated sizes for one paging simulation.

    Attributes:
        page_size: Bytes per page and per frame.
        memory_size: Bytes of physical memory (a multiple of page_size).
        number_of_pages: Pages in the logical address space.

    """

    page_size: int
    memory_size: int = DEFAULT_MEMORY_SIZE
    number_of_pages: int = 1

    def __post_init__(self) -> None:
        """Reject non-positive sizes and a memory size that isn't whole frames."""
        _require_positive("page_size", self.page_size)
        _require_positive("memory_size", self.memory_size)
        _require_positive("number_of_pages", self.number_of_pages)
        if self.memory_size % self.page_size:
            msg = (
                f"memory_size ({self.memory_size}) must be a multiple "
                f"of page_size ({self.page_size})"
            )
            raise ConstructionInvalidError(msg)

    @classmethod
    def for_process(
        cls,
        process_size: int,
        page_size: int,
        *,
        memory_size: int = DEFAULT_MEMORY_SIZE,
    ) -> "SimulationConfig":
        """Build a config for a process of ``process_size`` bytes.

        Args:
            process_size: Bytes of logical address space the process needs.
            page_size: Bytes per page.
            memory_size: Bytes of physical memory.

        Returns:
            A config with ``ceil(process_size / page_size)`` pages.

        Raises:
            ConstructionInvalidError: If any size is invalid.

        """
        _require_positive("process_size", process_size)
        _require_positive("page_size", page_size)
        return cls(
            page_size=page_size,
            memory_size=memory_size,
            number_of_pages=-(-process_size // page_size),
        )

    @property
    def frame_count(self) -> int:
        """Return the number of physical frames."""
        return self.memory_size // self.page_size

    @property
    def process_size(self) -> int:
        """Return the logical address space size in bytes (whole pages)."""
        return self.page_size * self.number_of_pages
