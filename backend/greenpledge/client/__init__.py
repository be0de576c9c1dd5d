"""Client Data Access — typed async access to the GreenPledge REST API.

Invariants:
    - The cache is the single source of truth for anything a caller renders
    - Mutations invalidate the affected collection; nothing is updated optimistically

Design Decisions:
    - httpx.AsyncClient: same library the test suite drives the app with, and
      ASGITransport lets the client run against the app in-process
"""
