"""Browser-facing JSON API for the paging simulator.

This package provides a Flask application that exposes one paging
simulation over HTTP.  It is an **optional** extra — install with::

    pip install paging-sim[web]

The ``create_app`` factory in ``app.py`` serves three endpoints:

- ``POST /api/process`` — create a process from its size and page size.
- ``POST /api/access`` — access a logical address and return the result.
- ``GET /api/state`` — frames, page table, FIFO queue, and counters.
"""
