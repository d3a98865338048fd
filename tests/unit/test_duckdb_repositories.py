"""
Unit tests for the DuckDB repositories against a temporary database file.
"""

from datetime import datetime

import pytest

from well_reports.domain.entities.report import Report
from well_reports.domain.entities.user import User
from well_reports.domain.entities.well import Well
from well_reports.domain.ports.repository import MAX_WINDOW, QueryPagination
from well_reports.infrastructure.repositories.duckdb_report_repository import DuckDBReportRepository
from well_reports.infrastructure.repositories.duckdb_user_repository import DuckDBUserRepository
from well_reports.infrastructure.repositories.duckdb_well_repository import DuckDBWellRepository

NOW = datetime(2024, 5, 1, 8, 30, 0)


def make_user(user_id, username="jdoe", role="operator"):
    return User(id=user_id, username=username, password_hash="$2b$04$hash", role=role, created_at=NOW)


def make_well(well_id, name="W-1"):
    return Well(id=well_id, name=name, location="Field A", created_at=NOW)


def make_report(report_id, created_by="u1", well_id="w1", title="R"):
    return Report(
        id=report_id, title=title, content="c", pressure=100.0, well_status="producing",
        temperature=55.5, created_by=created_by, well_id=well_id, created_at=NOW
    )


@pytest.fixture
def users(db_path):
    return DuckDBUserRepository(db_path)


@pytest.fixture
def wells(db_path):
    return DuckDBWellRepository(db_path)


@pytest.fixture
def reports(db_path, users, wells):
    return DuckDBReportRepository(db_path)


class TestDuckDBUserRepository:

    @pytest.mark.asyncio
    async def test_save_and_get_by_username(self, users):
        await users.save(make_user("u1"))

        found = await users.get_by_username("jdoe")

        assert found is not None
        assert found.id == "u1"
        assert found.password_hash == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_unknown_username(self, users):
        assert await users.get_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_duplicate_username_returns_first(self, users):
        await users.save(make_user("u1", role="admin"))
        await users.save(make_user("u2", role="operator"))

        found = await users.get_by_username("jdoe")

        assert found.id == "u1"
        assert found.role == "admin"


class TestDuckDBWellRepository:

    @pytest.mark.asyncio
    async def test_get_all_keeps_insertion_order(self, wells):
        for well_id, name in [("w3", "C"), ("w1", "A"), ("w2", "B")]:
            await wells.save(make_well(well_id, name))

        result = await wells.get_all()

        assert [w.name for w in result] == ["C", "A", "B"]

    @pytest.mark.asyncio
    async def test_delete(self, wells):
        await wells.save(make_well("w1"))

        assert await wells.delete("w1") is True
        assert await wells.delete("w1") is False
        assert await wells.get_all() == []


class TestDuckDBReportRepository:

    @pytest.mark.asyncio
    async def test_find_page_resolves_references(self, users, wells, reports):
        await users.save(make_user("u1", username="alice"))
        await wells.save(make_well("w1", name="Candeias-7"))
        await reports.save(make_report("r1"))

        result = await reports.find_page(QueryPagination(offset=0, limit=4))

        assert result.total_count == 1
        view = result.items[0]
        assert view.created_by.username == "alice"
        assert view.well.name == "Candeias-7"
        assert view.pressure == 100.0

    @pytest.mark.asyncio
    async def test_dangling_references_are_null(self, reports):
        await reports.save(make_report("r1", created_by="gone", well_id="gone"))

        result = await reports.find_page(QueryPagination(offset=0, limit=4))

        assert result.items[0].created_by is None
        assert result.items[0].well is None

    @pytest.mark.asyncio
    async def test_paging_window(self, reports):
        for i in range(1, 11):
            await reports.save(make_report(f"r{i}", title=f"R{i}"))

        page3 = await reports.find_page(QueryPagination.for_page(3, 4))

        assert [v.title for v in page3.items] == ["R9", "R10"]
        assert page3.total_count == 10

    @pytest.mark.asyncio
    async def test_largest_window_is_accepted(self, reports):
        await reports.save(make_report("r1"))

        everything = await reports.find_page(QueryPagination(offset=0, limit=MAX_WINDOW))
        past_end = await reports.find_page(QueryPagination(offset=MAX_WINDOW, limit=MAX_WINDOW))

        assert [v.id for v in everything.items] == ["r1"]
        assert past_end.items == []
        assert past_end.total_count == 1

    @pytest.mark.asyncio
    async def test_delete(self, reports):
        await reports.save(make_report("r1"))

        assert await reports.delete("r1") is True
        assert await reports.delete("r1") is False
        assert (await reports.find_page(QueryPagination())).total_count == 0


class TestQueryPagination:

    def test_for_page(self):
        assert QueryPagination.for_page(3, 4) == QueryPagination(offset=8, limit=4)

    def test_oversized_limit_is_clamped(self):
        pagination = QueryPagination.for_page(1, 10 ** 20)
        assert pagination == QueryPagination(offset=0, limit=MAX_WINDOW)

    def test_oversized_offset_is_clamped(self):
        pagination = QueryPagination.for_page(10 ** 20, 4)
        assert pagination.offset == MAX_WINDOW
        assert pagination.limit == 4

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            QueryPagination(offset=0, limit=0)
