"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, seed data, API responses)
    - Wire format is camelCase; Python attributes are snake_case
    - Domain bounds come from core/domain_types.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
    - Create (full) and Update (partial) variants per entity
"""
