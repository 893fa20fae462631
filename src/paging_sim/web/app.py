"""Flask application factory for the paging simulator web API.

The ``create_app`` function holds one simulation and returns a Flask
app with three endpoints:

- ``POST /api/process`` — create (or replace) the simulated process.
- ``POST /api/access`` — access a logical address; returns the
  translation, its narrative, and the memory and page table after it.
- ``GET /api/state`` — return the current tables without accessing.

Bad input and out-of-range addresses answer 400 with ``{"error": ...}``;
accessing before a process exists answers 409.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from flask import Flask, Response, jsonify, request

from paging_sim.config import DEFAULT_MEMORY_SIZE, ConstructionInvalidError, SimulationConfig
from paging_sim.engine import AddressOutOfBoundsError, PagingEngine
from paging_sim.logging import Logger, LogLevel
from paging_sim.report import narrate, narrate_error, record_access

_HTTP_BAD_REQUEST = 400
_HTTP_CONFLICT = 409
_SOURCE = "web"


def _int_field(data: dict[str, Any], name: str) -> int | None:
    """Return ``data[name]`` if it is a real int (not a bool), else None."""
    value = data.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _state(engine: PagingEngine) -> dict[str, Any]:
    """Serialise the engine's read-only views."""
    return {
        "page_size": engine.page_size,
        "memory_size": engine.memory_size,
        "number_of_pages": engine.number_of_pages,
        "frames": [asdict(frame) for frame in engine.frames()],
        "page_table": [asdict(entry) for entry in engine.page_table_entries()],
        "load_order": engine.load_order(),
        "stats": {**asdict(engine.stats), "fault_rate": engine.stats.fault_rate},
    }


def create_app(*, logger: Logger | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        logger: Event log to record requests in (a fresh one if omitted).

    Returns:
        A configured Flask application ready to serve.

    """
    log = logger if logger is not None else Logger()
    engine: PagingEngine | None = None

    app = Flask(__name__)

    @app.route("/api/process", methods=["POST"])
    def create_process() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Create a process from ``{"process_size": n, "page_size": n}``.

        An optional ``memory_size`` overrides the default 16 bytes.

        """
        nonlocal engine
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        process_size = _int_field(data, "process_size")
        page_size = _int_field(data, "page_size")
        memory_size = _int_field(data, "memory_size") if "memory_size" in data else DEFAULT_MEMORY_SIZE
        if process_size is None or page_size is None or memory_size is None:
            msg = "Please enter valid sizes for process and page!"
            log.log(LogLevel.ERROR, msg, source=_SOURCE)
            return jsonify({"error": msg}), _HTTP_BAD_REQUEST
        try:
            config = SimulationConfig.for_process(
                process_size, page_size, memory_size=memory_size
            )
        except ConstructionInvalidError as exc:
            log.log(LogLevel.ERROR, str(exc), source=_SOURCE)
            return jsonify({"error": str(exc)}), _HTTP_BAD_REQUEST

        engine = PagingEngine.from_config(config)
        message = (
            f"Process created with size: {process_size} bytes, "
            f"divided into {config.number_of_pages} pages."
        )
        log.log(LogLevel.INFO, message, source=_SOURCE)
        return jsonify({"message": message, **_state(engine)})

    @app.route("/api/access", methods=["POST"])
    def access() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Access ``{"address": n}`` and return the translation and tables."""
        if engine is None:
            return jsonify({"error": "Please create a process first!"}), _HTTP_CONFLICT
        data = request.get_json(silent=True)
        address = _int_field(data, "address") if isinstance(data, dict) else None
        if address is None:
            return jsonify({"error": "Please enter a valid logical address!"}), _HTTP_BAD_REQUEST
        try:
            result = engine.access(address)
        except AddressOutOfBoundsError as exc:
            message = narrate_error(exc)
            log.log(LogLevel.ERROR, message, source=_SOURCE, address=address)
            return jsonify({"error": message, "limit": exc.limit}), _HTTP_BAD_REQUEST

        record_access(log, result, source=_SOURCE)
        return jsonify(
            {
                "result": {
                    "logical_address": result.logical_address,
                    "page_number": result.page_number,
                    "offset": result.offset,
                    "frame_number": result.frame_number,
                    "physical_address": result.physical_address,
                    "outcome": str(result.outcome),
                    "evicted_page": result.evicted_page,
                },
                "narrative": [text for _level, text in narrate(result)],
                **_state(engine),
            }
        )

    @app.route("/api/state")
    def state() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return the current tables, or 409 if no process exists."""
        if engine is None:
            return jsonify({"error": "Please create a process first!"}), _HTTP_CONFLICT
        return jsonify(_state(engine))

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``paging-sim-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
