"""Tests for the console front end.

The console returns strings and never prints, so commands are tested
directly.  The REPL loop itself is exercised with patched ``input``.
"""

from unittest.mock import patch

import pytest

from paging_sim.console import DEMO_ADDRESSES, Console, demo, run, run_demo
from paging_sim.logging import LogLevel


def _created_console() -> Console:
    """Create a console with a 32-byte process of 4-byte pages."""
    console = Console()
    console.execute("create 32 4")
    return console


class TestCreate:
    """Verify process creation."""

    def test_create_reports_pages(self) -> None:
        """Creating a process should report its page count."""
        console = Console()
        output = console.execute("create 30 4")
        assert "divided into 8 pages" in output
        assert console.engine is not None
        assert console.engine.frame_count == 4

    def test_create_with_memory_size(self) -> None:
        """An optional third argument should set the memory size."""
        console = Console()
        console.execute("create 64 8 32")
        assert console.engine is not None
        assert console.engine.frame_count == 4

    def test_create_non_numeric(self) -> None:
        """Non-numeric sizes should produce the sizes error."""
        console = Console()
        output = console.execute("create big 4")
        assert output == "Please enter valid sizes for process and page!"
        assert console.engine is None

    def test_create_invalid_sizes(self) -> None:
        """Sizes rejected by the config should be reported, not raised."""
        console = Console()
        output = console.execute("create 32 0")
        assert output.startswith("Error:")
        assert console.engine is None

    def test_create_usage(self) -> None:
        """Missing arguments should print usage."""
        assert Console().execute("create 32").startswith("Usage:")

    def test_create_replaces_previous_process(self) -> None:
        """A second create should start from empty memory."""
        console = _created_console()
        console.execute("access 0")
        console.execute("create 16 4")
        assert console.engine is not None
        assert console.engine.load_order() == []


class TestAccess:
    """Verify the access command."""

    def test_access_before_create(self) -> None:
        """Accessing with no process should ask for one."""
        assert Console().execute("access 4") == "Please create a process first!"

    def test_access_reports_fault_then_hit(self) -> None:
        """The first touch should fault, the second should hit."""
        console = _created_console()
        first = console.execute("access 5")
        second = console.execute("access 6")
        assert "Page Fault! Page 1 is not in memory." in first
        assert "Page Fault" not in second
        assert "Page 1 is in memory at Frame 0" in second

    def test_access_many(self) -> None:
        """Several addresses should be processed in order."""
        console = _created_console()
        output = console.execute("access 1 4 9")
        assert output.count("Accessing Logical Address") == 3

    def test_access_out_of_range(self) -> None:
        """An address past the process should be reported, and later ones still run."""
        console = _created_console()
        output = console.execute("access 32 0")
        assert "Error: Logical address 32 exceeds process size." in output
        assert "Accessing Logical Address 0" in output

    def test_access_non_numeric(self) -> None:
        """A non-numeric address should produce the address error."""
        console = _created_console()
        assert console.execute("access x") == "Please enter a valid logical address!"

    def test_access_logs_narrative(self) -> None:
        """Accesses should be recorded in the event log."""
        console = _created_console()
        console.execute("access 0 4 8 12 16")
        warnings = console.logger.filter(min_level=LogLevel.WARNING)
        assert any("Replacing Page 0" in e.message for e in warnings)


class TestDisplayCommands:
    """Verify memory, table, queue, stats, and log."""

    def test_memory(self) -> None:
        """Memory should list frames."""
        console = _created_console()
        console.execute("access 9")
        assert "Frame 0: Page 2" in console.execute("memory")

    def test_table(self) -> None:
        """Table should list pages."""
        console = _created_console()
        console.execute("access 9")
        output = console.execute("table")
        assert "Page 2 -> Frame 0" in output
        assert "Page 0 -> Not loaded in memory" in output

    def test_queue(self) -> None:
        """Queue should show load order."""
        console = _created_console()
        console.execute("access 8 0")
        assert console.execute("queue") == "FIFO queue: 2 <- 0"

    def test_stats(self) -> None:
        """Stats should count accesses."""
        console = _created_console()
        console.execute("access 0 1")
        assert "Hits:        1" in console.execute("stats")

    @pytest.mark.parametrize("command", ["memory", "table", "queue", "stats"])
    def test_display_before_create(self, command: str) -> None:
        """Display commands should ask for a process first."""
        assert Console().execute(command) == "Please create a process first!"

    def test_log(self) -> None:
        """Log should replay recorded entries."""
        console = _created_console()
        output = console.execute("log 1")
        assert output.startswith("[INFO] console: Process created")

    def test_log_bad_count(self) -> None:
        """A non-numeric count should print usage."""
        assert Console().execute("log many") == "Usage: log [count]"


class TestDispatch:
    """Verify parsing and dispatch."""

    def test_blank_line(self) -> None:
        """A blank line should produce no output."""
        assert Console().execute("   ") == ""

    def test_unknown_command(self) -> None:
        """Unknown commands should be reported."""
        assert "Unknown command: frobnicate" in Console().execute("frobnicate")

    def test_case_insensitive(self) -> None:
        """Command names should be case-insensitive."""
        assert "Commands:" in Console().execute("HELP")

    def test_exit_returns_sentinel(self) -> None:
        """Exit should return the sentinel."""
        assert Console().execute("exit") == Console.EXIT_SENTINEL


class TestDemo:
    """Verify the demo transcript."""

    def test_transcript_covers_every_address(self) -> None:
        """Every demo address should be narrated."""
        transcript = run_demo()
        assert transcript.count("Accessing Logical Address") == len(DEMO_ADDRESSES)

    def test_transcript_shows_fifo_evictions(self) -> None:
        """Pages 0-3 should be replaced in load order."""
        transcript = run_demo()
        assert "Replacing Page 0 from Frame 0 with Page 5" in transcript
        assert "Replacing Page 1 from Frame 1 with Page 6" in transcript
        assert "Replacing Page 2 from Frame 2 with Page 1" in transcript
        assert "Replacing Page 3 from Frame 3 with Page 7" in transcript

    def test_transcript_ends_with_stats(self) -> None:
        """The transcript should finish with the counters."""
        assert run_demo().rstrip().endswith("Fault rate:  80.0%")

    def test_demo_prints(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The demo entry point should print the transcript."""
        demo()
        assert "Current Memory State:" in capsys.readouterr().out


class TestREPL:
    """Verify the interactive loop with scripted input."""

    def test_runs_until_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Commands should run in order and exit should stop the loop."""
        with patch("builtins.input", side_effect=["create 32 4", "access 4", "exit", "help"]):
            run([])
        out = capsys.readouterr().out
        assert "divided into 8 pages" in out
        assert "Page Fault! Page 1" in out
        assert "Commands:" not in out

    def test_eof_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ctrl+D should end the loop cleanly."""
        with patch("builtins.input", side_effect=EOFError):
            run([])
        assert "Paging simulator" in capsys.readouterr().out

    def test_interrupt_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ctrl+C should end the loop cleanly."""
        with patch("builtins.input", side_effect=KeyboardInterrupt):
            run([])
        assert "Interrupted." in capsys.readouterr().out

    def test_demo_flag_prints_transcript(self, capsys: pytest.CaptureFixture[str]) -> None:
        """``--demo`` on the command line should print the demo, not prompt."""
        with (
            patch("sys.argv", ["paging-sim", "--demo"]),
            patch("builtins.input", side_effect=EOFError) as fake_input,
        ):
            run()
        out = capsys.readouterr().out
        assert "Accessing Logical Address 1" in out
        assert "Paging simulator" not in out
        fake_input.assert_not_called()

    def test_demo_flag_as_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An explicit argv should be honoured over sys.argv."""
        run(["--demo"])
        assert "Replacing Page 3 from Frame 3 with Page 7" in capsys.readouterr().out
