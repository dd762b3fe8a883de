"""Hierarchy API tests (in-memory person store via dependency overrides)."""

import dataclasses

from httpx import AsyncClient


async def test_hierarchy_tree(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy")
    assert response.status_code == 200
    tree = response.json()
    assert tree["name"] == "Alex Johnson"
    assert [c["name"] for c in tree["children"]] == ["Marcus Williams", "Sarah Chen"]
    sarah = tree["children"][1]
    assert sarah["jobTitle"] == "VP of Engineering"
    assert [c["name"] for c in sarah["children"]] == ["David Kim", "João Silva"]


async def test_hierarchy_subtree(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy", params={"rootId": 3})
    tree = response.json()
    assert tree["id"] == 3
    assert [c["id"] for c in tree["children"]] == [7]


async def test_hierarchy_unknown_root(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy", params={"rootId": 999})
    assert response.status_code == 404


async def test_hierarchy_cycle_is_server_error(client: AsyncClient, org_repo) -> None:
    """A corrupted manager loop yields 500 without leaking the path."""
    org_repo.people[1] = dataclasses.replace(org_repo.people[1], manager_id=6)
    response = await client.get("/api/v1/hierarchy", params={"rootId": 1})
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "CYCLE_DETECTED"
    assert body["message"] == "Internal server error"
    assert body["details"] == {}


async def test_hierarchy_without_root(client: AsyncClient, org_repo) -> None:
    org_repo.people[1] = dataclasses.replace(org_repo.people[1], manager_id=6)
    response = await client.get("/api/v1/hierarchy")
    assert response.status_code == 404


async def test_search(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy/search", params={"q": "sarah"})
    assert response.status_code == 200
    results = response.json()
    assert [r["id"] for r in results] == [2]
    assert results[0]["matchedFields"] == ["name"]
    assert results[0]["score"] >= 60


async def test_search_title_and_department(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/hierarchy/search", params={"q": "engineering", "limit": 1}
    )
    [top] = response.json()
    assert top["id"] == 2
    assert top["score"] == 50
    assert top["matchedFields"] == ["jobTitle", "department"]


async def test_search_blank(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy/search", params={"q": ""})
    assert response.status_code == 200
    assert response.json() == []


async def test_summary(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy/summary")
    assert response.json() == {
        "totalPeople": 7,
        "departmentCount": 3,
        "levels": 4,
        "averageTeamSize": 2,
    }


async def test_path(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy/path/6")
    assert response.status_code == 200
    path = response.json()
    assert [p["id"] for p in path] == [1, 2, 4, 6]
    assert "children" not in path[0]


async def test_path_not_in_tree(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hierarchy/path/999")
    assert response.status_code == 404
