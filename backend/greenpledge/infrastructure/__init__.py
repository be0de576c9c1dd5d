"""Infrastructure Layer — database sessions, storage implementation, security, logging.

Invariants:
    - Everything that performs IO or holds process-wide resources lives here
"""
