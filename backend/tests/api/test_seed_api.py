"""Seed route — idempotent catalog population."""


async def test_seed_then_already_seeded(client):
    first = await client.post("/api/seed")
    assert first.status_code == 200
    assert first.json() == {"message": "Database seeded successfully", "count": 6}

    second = await client.post("/api/seed")
    assert second.status_code == 200
    assert second.json() == {"message": "Database already seeded"}

    projects = (await client.get("/api/projects")).json()
    assert len(projects) == 6
    assert {p["projectType"] for p in projects} <= {
        "reforestation", "conservation", "restoration", "afforestation",
    }
