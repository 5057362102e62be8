"""Infrastructure Layer — database, HTTP clients, and cross-cutting concerns.

Invariants:
    - Infrastructure implements the Protocols in core/repository_protocols.py
    - All external calls bounded by a timeout and mapped to core/errors.py types

Design Decisions:
    - Thin adapters over raw clients: the orchestrator never sees SQLAlchemy or httpx
"""
