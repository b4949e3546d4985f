"""
Pydantic schema definitions for API payloads.

Each domain (artworks, galleries, users) defines its own Pydantic
models for request and response bodies.  Schemas are separated from
the domain records in ``app.models`` to decouple API representation
from storage.
"""
