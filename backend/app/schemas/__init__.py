"""Pydantic Schemas — request/response validation for API and model-server boundaries.

Invariants:
    - Schemas validate at system boundary (client responses, model server payloads)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
