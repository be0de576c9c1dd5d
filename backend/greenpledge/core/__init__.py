"""Core Layer — domain types, errors, storage contracts, seed data.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - Nothing in core/ performs IO

Design Decisions:
    - Storage contract lives here, implementation lives in infrastructure/
      (dependency arrows point inward only)
"""
