"""QueryCache — path keys and collection-prefix invalidation."""

from greenpledge.client.cache import QueryCache


def test_set_get_contains():
    cache = QueryCache()
    cache.set("/api/projects", [1, 2])

    assert "/api/projects" in cache
    assert cache.get("/api/projects") == [1, 2]
    assert cache.get("/api/pledges") is None
    assert len(cache) == 1


def test_invalidate_drops_collection_detail_and_query_keys():
    cache = QueryCache()
    for key in (
        "/api/projects",
        "/api/projects/abc",
        "/api/projects?status=active",
        "/api/projectsarchive",
        "/api/pledges?projectId=abc",
    ):
        cache.set(key, key)

    dropped = cache.invalidate("/api/projects")

    assert sorted(dropped) == [
        "/api/projects", "/api/projects/abc", "/api/projects?status=active",
    ]
    assert sorted(cache.keys()) == ["/api/pledges?projectId=abc", "/api/projectsarchive"]


def test_invalidate_missing_prefix_is_noop():
    cache = QueryCache()
    cache.set("/api/projects", [])
    assert cache.invalidate("/api/pledges") == []
    assert len(cache) == 1


def test_clear():
    cache = QueryCache()
    cache.set("/api/projects", [])
    cache.clear()
    assert cache.keys() == []
