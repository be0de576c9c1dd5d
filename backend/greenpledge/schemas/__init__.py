"""Pydantic Schemas — entity, insert and update shapes for every persisted entity.

Invariants:
    - Schemas validate at system boundary (request bodies, storage inputs, responses)
    - Each entity declares its entity, insert and update shapes separately;
      no shape is derived from another by omitting fields
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
