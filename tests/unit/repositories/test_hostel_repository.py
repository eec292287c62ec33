"""Tests for hostel and review repository queries."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from hostelhub.models.orm.hostel import Hostel
from hostelhub.repositories.hostel import HostelRepository
from hostelhub.repositories.review import ReviewRepository


def _mock_session(rows: list) -> AsyncMock:
    mock_session = AsyncMock()
    scalars = MagicMock()
    scalars.all.return_value = rows
    result = MagicMock()
    result.scalars.return_value = scalars
    result.scalar_one_or_none.return_value = rows[0] if rows else None
    mock_session.execute.return_value = result
    return mock_session


def _sql(mock_session: AsyncMock) -> str:
    statement = mock_session.execute.await_args.args[0]
    return str(statement.compile(dialect=postgresql.dialect()))


@pytest.mark.unit
class TestHostelRepository:
    """Tests for HostelRepository."""

    async def test_get_by_id_uses_hostel_id(self):
        hostel = Hostel(hostel_id=3, name="Lake View")
        mock_session = _mock_session([hostel])

        result = await HostelRepository(mock_session).get_by_id(3)

        assert result is hostel
        assert "hostels.hostel_id = " in _sql(mock_session)

    async def test_get_similar_excludes_self(self):
        hostel = Hostel(hostel_id=3, hostel_type="boys", bed_type="bunk", chota_dhobi_facility=True)
        mock_session = _mock_session([])

        result = await HostelRepository(mock_session).get_similar(hostel)

        assert result == []
        sql = _sql(mock_session)
        assert "hostels.hostel_type = " in sql
        assert "hostels.bed_type = " in sql
        assert "hostels.chota_dhobi_facility = " in sql
        assert "hostels.hostel_id != " in sql


@pytest.mark.unit
class TestReviewRepository:
    """Tests for ReviewRepository."""

    async def test_get_by_hostel_joins_floor_plans(self):
        mock_session = _mock_session([])

        await ReviewRepository(mock_session).get_by_hostel(1)

        sql = _sql(mock_session)
        assert "JOIN floor_plans ON reviews.floor_id = floor_plans.id" in sql
        assert "floor_plans.hostel_id = " in sql

    async def test_get_by_hostel_and_room(self):
        mock_session = _mock_session([])

        result = await ReviewRepository(mock_session).get_by_hostel_and_room(1, "204")

        assert result is None
        sql = _sql(mock_session)
        assert "reviews.hostel_id = " in sql
        assert "reviews.room_number = " in sql
