"""Infrastructure Layer — database lifecycle and logging setup.

Invariants:
    - Infrastructure never imports from api/ or repositories/

Design Decisions:
    - Lifecycle objects are constructed explicitly and injected (no import-time side effects)
"""
