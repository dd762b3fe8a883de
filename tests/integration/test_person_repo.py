"""Person repository integration tests. Require Postgres; session is rolled back after each test."""

import pytest

from orgchart.application.dtos.person import PeopleQuery, PersonCreate, PersonFilter
from orgchart.application.services.chain_resolver import ChainResolver
from orgchart.application.services.tree_builder import TreeBuilder
from orgchart.domain.enums import PersonType
from orgchart.infrastructure.persistence.repositories import PersonRepository


async def _seed(repo: PersonRepository) -> dict[str, int]:
    ceo = await repo.create_person(
        PersonCreate(name="Repo Ceo", job_title="CEO", department="Repo Exec")
    )
    vp = await repo.create_person(
        PersonCreate(name="Repo Vp", job_title="VP", department="Repo Eng", manager_id=ceo.id)
    )
    dev_b = await repo.create_person(
        PersonCreate(name="Repo Dev B", job_title="Dev", department="Repo Eng", manager_id=vp.id)
    )
    dev_a = await repo.create_person(
        PersonCreate(
            name="Repo Dev A",
            job_title="Dev",
            department="Repo Eng",
            manager_id=vp.id,
            type=PersonType.PARTNER,
        )
    )
    return {"ceo": ceo.id, "vp": vp.id, "dev_a": dev_a.id, "dev_b": dev_b.id}


@pytest.mark.requires_db
async def test_create_and_get(db_session) -> None:
    repo = PersonRepository(db_session)
    ids = await _seed(repo)
    found = await repo.get_by_id(ids["vp"])
    assert found is not None
    assert found.manager_id == ids["ceo"]
    assert found.created_at is not None
    assert await repo.exists(ids["vp"]) is True
    assert await repo.get_by_id(-1) is None


@pytest.mark.requires_db
async def test_direct_reports_sorted_by_name(db_session) -> None:
    repo = PersonRepository(db_session)
    ids = await _seed(repo)
    reports = await repo.find_direct_reports(ids["vp"])
    assert [p.name for p in reports] == ["Repo Dev A", "Repo Dev B"]


@pytest.mark.requires_db
async def test_tree_and_chain_over_sql(db_session) -> None:
    repo = PersonRepository(db_session)
    ids = await _seed(repo)
    tree = await TreeBuilder(repo).build(ids["ceo"])
    assert [c.id for c in tree.children] == [ids["vp"]]
    chain = await ChainResolver(repo).resolve(ids["dev_a"])
    assert [p.id for p in chain] == [ids["vp"], ids["ceo"]]


@pytest.mark.requires_db
async def test_list_people_filter_and_count(db_session) -> None:
    repo = PersonRepository(db_session)
    await _seed(repo)
    query = PeopleQuery(limit=10, filter=PersonFilter(search="repo dev"))
    items, total = await repo.list_people(query)
    assert total == 2
    assert [p.name for p in items] == ["Repo Dev A", "Repo Dev B"]
    assert await repo.count(PersonFilter(department="Repo Eng", type=PersonType.PARTNER)) == 1


@pytest.mark.requires_db
async def test_managers_include_report_count(db_session) -> None:
    repo = PersonRepository(db_session)
    ids = await _seed(repo)
    managers = {m.person.id: m.direct_reports_count for m in await repo.get_managers()}
    assert managers[ids["vp"]] == 2
    assert managers[ids["ceo"]] == 1
    assert ids["dev_a"] not in managers


@pytest.mark.requires_db
async def test_update_and_delete_detaches_reports(db_session) -> None:
    repo = PersonRepository(db_session)
    ids = await _seed(repo)
    updated = await repo.update_person(ids["dev_a"], job_title="Lead Dev")
    assert updated.job_title == "Lead Dev"
    deleted = await repo.delete_person(ids["vp"])
    assert deleted.id == ids["vp"]
    dev_b = await repo.get_by_id(ids["dev_b"])
    assert dev_b.manager_id is None
    assert await repo.delete_person(ids["vp"]) is None


@pytest.mark.requires_db
async def test_search_wildcards_are_literal(db_session) -> None:
    """% and _ in the search text only match themselves."""
    repo = PersonRepository(db_session)
    await _seed(repo)
    await repo.create_person(
        PersonCreate(name="Repo 100% Club", job_title="Dev", department="Repo Eng")
    )
    assert await repo.count(PersonFilter(search="_", department="Repo Eng")) == 0
    items, total = await repo.list_people(
        PeopleQuery(filter=PersonFilter(search="100%", department="Repo Eng"))
    )
    assert total == 1
    assert items[0].name == "Repo 100% Club"
