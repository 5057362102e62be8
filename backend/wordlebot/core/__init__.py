"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Parsing, day mapping and reply formatting are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the orchestrator
      awaits the IO around these functions
"""
