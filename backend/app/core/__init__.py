"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or repositories/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: routes and repositories do the IO)
"""
