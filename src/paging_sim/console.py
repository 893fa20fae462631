"""Console front end — command interpreter, REPL, and demo run.

The ``Console`` turns command strings into output strings and never
does I/O itself, so it is fully testable.  ``run()`` is the thin
read-eval-print loop around it, and ``demo()`` replays the classic
reference string on a 4-frame memory and prints the full transcript.

Commands::

    create <process_size> <page_size> [memory_size]
    access <address> [<address> ...]
    memory | table | queue | stats | log [count]
    help | exit

Design choices:
    - **Command dispatch via a dict**, like a shell: one method per
      command, one dict entry to register it.
    - **Every message is also logged** to the console's ``Logger``, so
      the ``log`` command can replay the session.
"""

import sys
from collections.abc import Callable
from typing import TypeAlias

from paging_sim.config import DEFAULT_MEMORY_SIZE, ConstructionInvalidError, SimulationConfig
from paging_sim.engine import AddressOutOfBoundsError, PagingEngine
from paging_sim.logging import Logger, LogLevel
from paging_sim.report import (
    format_load_order,
    format_memory,
    format_narrative,
    format_page_table,
    format_stats,
    narrate_error,
    record_access,
)

_Handler: TypeAlias = Callable[[list[str]], str]

_SOURCE = "console"
_SEPARATOR = "-" * 40
_DEFAULT_LOG_TAIL = 20

# The reference string replayed by ``demo()``: 4-byte pages, 16 bytes
# of memory (4 frames), an 8-page process.
DEMO_PAGE_SIZE = 4
DEMO_MEMORY_SIZE = 16
DEMO_NUMBER_OF_PAGES = 8
DEMO_ADDRESSES = (1, 4, 9, 12, 8, 13, 20, 24, 4, 28)


class Console:
    """Interpret paging-simulator commands and return their output."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, logger: Logger | None = None) -> None:
        """Create a console with no process loaded yet."""
        self._engine: PagingEngine | None = None
        self._logger = logger if logger is not None else Logger()
        self._commands: dict[str, _Handler] = {
            "create": self._cmd_create,
            "access": self._cmd_access,
            "memory": self._cmd_memory,
            "table": self._cmd_table,
            "queue": self._cmd_queue,
            "stats": self._cmd_stats,
            "log": self._cmd_log,
            "help": self._cmd_help,
            "exit": self._cmd_exit,
        }

    @property
    def engine(self) -> PagingEngine | None:
        """Return the current simulation, if a process has been created."""
        return self._engine

    @property
    def logger(self) -> Logger:
        """Return the session's event log."""
        return self._logger

    def execute(self, command: str) -> str:
        """Parse and run one command line.

        Args:
            command: The raw input, e.g. ``"access 4 9"``.

        Returns:
            The command's output (empty for a blank line).

        """
        parts = command.split()
        if not parts:
            return ""
        name, args = parts[0].lower(), parts[1:]
        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}. Type 'help' for commands."
        return handler(args)

    def _say(self, level: LogLevel, message: str, *, address: int | None = None) -> str:
        self._logger.log(level, message, source=_SOURCE, address=address)
        return message

    # -- Commands ------------------------------------------------------------

    def _cmd_create(self, args: list[str]) -> str:
        """Create a new process, discarding the previous simulation."""
        if len(args) not in (2, 3):
            return "Usage: create <process_size> <page_size> [memory_size]"
        try:
            sizes = [int(arg) for arg in args]
        except ValueError:
            return self._say(LogLevel.ERROR, "Please enter valid sizes for process and page!")
        process_size, page_size = sizes[0], sizes[1]
        memory_size = sizes[2] if len(sizes) == 3 else DEFAULT_MEMORY_SIZE  # noqa: PLR2004
        try:
            config = SimulationConfig.for_process(
                process_size, page_size, memory_size=memory_size
            )
        except ConstructionInvalidError as exc:
            return self._say(LogLevel.ERROR, f"Error: {exc}")
        self._engine = PagingEngine.from_config(config)
        return self._say(
            LogLevel.INFO,
            f"Process created with size: {process_size} bytes, divided into "
            f"{config.number_of_pages} pages ({config.frame_count} frames of memory).",
        )

    def _cmd_access(self, args: list[str]) -> str:
        """Access one or more logical addresses in order."""
        if self._engine is None:
            return self._say(LogLevel.ERROR, "Please create a process first!")
        if not args:
            return "Usage: access <address> [<address> ...]"
        try:
            addresses = [int(arg) for arg in args]
        except ValueError:
            return self._say(LogLevel.ERROR, "Please enter a valid logical address!")

        blocks: list[str] = []
        for address in addresses:
            try:
                result = self._engine.access(address)
            except AddressOutOfBoundsError as exc:
                blocks.append(self._say(LogLevel.ERROR, narrate_error(exc), address=address))
                continue
            record_access(self._logger, result, source=_SOURCE)
            blocks.append(format_narrative(result))
        return "\n\n".join(blocks)

    def _cmd_memory(self, _args: list[str]) -> str:
        """Show frame occupancy."""
        if self._engine is None:
            return "Please create a process first!"
        return format_memory(self._engine.frames())

    def _cmd_table(self, _args: list[str]) -> str:
        """Show the page table."""
        if self._engine is None:
            return "Please create a process first!"
        return format_page_table(self._engine.page_table_entries())

    def _cmd_queue(self, _args: list[str]) -> str:
        """Show the FIFO load order."""
        if self._engine is None:
            return "Please create a process first!"
        return format_load_order(self._engine.load_order())

    def _cmd_stats(self, _args: list[str]) -> str:
        """Show hit and fault counters."""
        if self._engine is None:
            return "Please create a process first!"
        return format_stats(self._engine.stats)

    def _cmd_log(self, args: list[str]) -> str:
        """Show the most recent log entries."""
        count = _DEFAULT_LOG_TAIL
        if args:
            try:
                count = int(args[0])
            except ValueError:
                return "Usage: log [count]"
        return "\n".join(str(entry) for entry in self._logger.tail(count))

    def _cmd_help(self, _args: list[str]) -> str:
        """List the available commands."""
        return "\n".join(
            [
                "Commands:",
                "  create <process_size> <page_size> [memory_size]",
                "  access <address> [<address> ...]",
                "  memory    show frame occupancy",
                "  table     show the page table",
                "  queue     show the FIFO load order",
                "  stats     show hits, faults, and evictions",
                "  log [n]   show the last n log entries",
                "  exit      quit",
            ]
        )

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL


def run_demo() -> str:
    """Replay the demo reference string and return the full transcript.

    After every access the transcript shows the narrative, the memory
    frames, and the page table, separated by a rule.
    """
    engine = PagingEngine(
        page_size=DEMO_PAGE_SIZE,
        memory_size=DEMO_MEMORY_SIZE,
        number_of_pages=DEMO_NUMBER_OF_PAGES,
    )
    sections: list[str] = []
    for address in DEMO_ADDRESSES:
        result = engine.access(address)
        sections.append(
            "\n\n".join(
                [
                    format_narrative(result),
                    format_memory(engine.frames()),
                    format_page_table(engine.page_table_entries()),
                    _SEPARATOR,
                ]
            )
        )
    sections.append(format_stats(engine.stats))
    return "\n".join(sections)


def demo() -> None:
    """Print the demo transcript.

    This is the ``paging-sim-demo`` console entry point.
    """
    print(run_demo())  # noqa: T201


def run(argv: list[str] | None = None) -> None:
    """Run the interactive REPL, or print the demo with ``--demo``.

    This is the ``paging-sim`` console entry point.  Ctrl+D and Ctrl+C
    both exit cleanly.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``).

    """
    args = sys.argv[1:] if argv is None else argv
    if "--demo" in args:
        demo()
        return
    console = Console()
    print("Paging simulator. Type 'help' for commands, 'exit' to quit.")  # noqa: T201
    try:
        while True:
            try:
                command = input("paging $ ")
            except EOFError:
                print()  # noqa: T201
                break
            result = console.execute(command)
            if result == Console.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201
    except KeyboardInterrupt:
        print("\nInterrupted.")  # noqa: T201
