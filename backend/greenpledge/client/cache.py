"""Query Cache — responses keyed by resource path, invalidated by collection prefix.

Invariants:
    - Keys are request paths including the query string ("/api/pledges?projectId=...")
    - invalidate("/api/projects") drops "/api/projects", "/api/projects/<id>" and
      "/api/projects?..." but not "/api/projectsX"
"""

from typing import Any


class QueryCache:
    """In-memory path → value cache."""

    def __init__(self):
        self._entries: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, prefix: str) -> list[str]:
        """Drop every key under prefix. Returns the dropped keys."""
        dropped = [k for k in self._entries if _under(k, prefix)]
        for key in dropped:
            del self._entries[key]
        return dropped

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _under(key: str, prefix: str) -> bool:
    if key == prefix:
        return True
    return key.startswith(prefix) and key[len(prefix)] in "/?"
