"""
Unit tests for Candidate DAO.

WHAT: Tests for CandidateDAO database operations.

WHY: Verifies that:
1. Candidate CRUD operations work correctly
2. The (number_election, election_id) probe matches only that pair
3. The table itself doesn't enforce uniqueness of the pair

HOW: Uses pytest-asyncio with in-memory SQLite database for isolation.
"""

import pytest

from candidates.dao.candidate import CandidateDAO
from tests.factories import CandidateFactory


class TestCandidateDAOCreate:
    """Tests for candidate creation."""

    @pytest.mark.asyncio
    async def test_create_candidate_success(self, db_session):
        candidate_dao = CandidateDAO(db_session)

        candidate = await candidate_dao.create(
            name="Jane Doe",
            party_id=1,
            election_id=10,
            number_election=150,
        )

        assert candidate.id is not None
        assert candidate.name == "Jane Doe"
        assert candidate.party_id == 1
        assert candidate.election_id == 10
        assert candidate.number_election == 150
        assert candidate.created_at is not None
        assert candidate.updated_at is not None


class TestCandidateDAORead:
    """Tests for candidate read operations."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, db_session):
        candidate = await CandidateFactory.create(db_session, name="Findable Person")

        found = await CandidateDAO(db_session).get_by_id(candidate.id)

        assert found is not None
        assert found.name == "Findable Person"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, db_session):
        assert await CandidateDAO(db_session).get_by_id(12345) is None

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_id(self, db_session):
        for i in range(3):
            await CandidateFactory.create(
                db_session, name=f"Person Number{i}", number_election=150 + i
            )

        candidates = await CandidateDAO(db_session).list_all()

        assert [c.number_election for c in candidates] == [150, 151, 152]

    @pytest.mark.asyncio
    async def test_list_all_has_no_page_limit(self, db_session):
        for i in range(120):
            await CandidateFactory.create(db_session, number_election=1500 + i)

        candidates = await CandidateDAO(db_session).list_all()

        assert len(candidates) == 120

    @pytest.mark.asyncio
    async def test_get_by_number_and_election(self, db_session):
        candidate = await CandidateFactory.create(db_session, election_id=10, number_election=150)
        await CandidateFactory.create(db_session, election_id=20, number_election=150)
        await CandidateFactory.create(db_session, election_id=10, number_election=151)

        found = await CandidateDAO(db_session).get_by_number_and_election(150, 10)

        assert found is not None
        assert found.id == candidate.id

    @pytest.mark.asyncio
    async def test_get_by_number_and_election_no_match(self, db_session):
        await CandidateFactory.create(db_session, election_id=10, number_election=150)

        candidate_dao = CandidateDAO(db_session)

        assert await candidate_dao.get_by_number_and_election(150, 20) is None
        assert await candidate_dao.get_by_number_and_election(151, 10) is None


class TestCandidateDAOWrite:
    """Tests for candidate update and delete."""

    @pytest.mark.asyncio
    async def test_save_changes(self, db_session):
        candidate = await CandidateFactory.create(db_session)
        candidate_dao = CandidateDAO(db_session)

        candidate.name = "Jane Roe"
        candidate.election_id = 20
        await candidate_dao.save(candidate)

        found = await candidate_dao.get_by_id(candidate.id)
        assert found.name == "Jane Roe"
        assert found.election_id == 20

    @pytest.mark.asyncio
    async def test_delete_instance(self, db_session):
        candidate = await CandidateFactory.create(db_session)
        candidate_dao = CandidateDAO(db_session)

        await candidate_dao.delete_instance(candidate)

        assert await candidate_dao.get_by_id(candidate.id) is None


class TestCandidateDAOUniquenessGap:
    """
    Documents that the store doesn't enforce the registration pair.

    Uniqueness of (number_election, election_id) is a service rule
    checked before writes; concurrent writers can still store duplicates.
    """

    @pytest.mark.asyncio
    async def test_duplicate_pair_can_be_stored(self, db_session):
        first = await CandidateFactory.create(db_session, name="Jane Doe", number_election=150)
        second = await CandidateFactory.create(db_session, name="John Roe", number_election=150)

        assert first.id != second.id

        found = await CandidateDAO(db_session).get_by_number_and_election(150, 10)
        assert found.id == first.id
