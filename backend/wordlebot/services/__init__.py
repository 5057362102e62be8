"""Services Layer — the submission pipeline.

Invariants:
    - Services depend on Protocols, never on concrete infrastructure classes
"""
