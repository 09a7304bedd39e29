"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the domain objects in ``models`` so the
wire representation can evolve without touching persistence.
"""
