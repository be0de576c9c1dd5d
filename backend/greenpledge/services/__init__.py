"""Services Layer — workflows composed on top of the Storage protocol.

Invariants:
    - Services depend on Storage, never on AsyncSession directly
    - Routes stay thin: hashing, credential checks and seeding live here
"""
