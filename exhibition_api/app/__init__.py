"""
Application package initializer.

The project is organised into layers: ``models`` holds the domain
records, ``stores`` keeps them in memory, ``services`` implements the
catalog operations, and ``api`` exposes those operations over HTTP
with the Pydantic schemas from ``schemas``.  Cross‑cutting concerns
(configuration, logging, token security) live in ``core``.
"""

from .main import app  # noqa: F401
