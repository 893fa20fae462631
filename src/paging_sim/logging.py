"""Simulation event log.

The paging engine itself never prints or logs — it only returns
results.  The front ends (console and web) record what happened on
each access here, giving the running narrative a user reads while
stepping through a reference string:

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — one structured record (level, message, source, and
  the logical address it concerns, if any).
- **Logger** — an append-only buffer with filtering and clearing.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records are immutable.
    - **Page faults log at WARNING**, rejected addresses at ERROR, so a
      ``min_level`` filter picks out just the interesting events.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The front end that recorded the event (e.g. "console").
        address: The logical address involved, if the event is an access.

    """

    level: LogLevel
    message: str
    source: str
    address: int | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        address: int | None = None,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Front end that recorded the event.
            address: Logical address the event concerns.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source, address=address))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        address: int | None = None,
    ) -> list[LogEntry]:
        """Return entries matching every given criterion.

        Args:
            min_level: If set, only entries at or above this level.
            source: If set, only entries from this source.
            address: If set, only entries about this logical address.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        if address is not None:
            result = [e for e in result if e.address == address]
        return result

    def tail(self, count: int) -> list[LogEntry]:
        """Return the last *count* entries."""
        if count <= 0:
            return []
        return self._entries[-count:]

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
