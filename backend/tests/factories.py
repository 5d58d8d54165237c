"""
Test factories for creating test data.

WHY: Factories provide a consistent, reusable way to create test objects,
reducing duplication and making tests more maintainable.

The fake lookup clients stand in for the Party and Election services.
They expose the same async methods as PartyClient and ElectionClient and
raise the same LookupNotFoundError / LookupServerError kinds.
"""

from typing import Dict, Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from candidates.core.exceptions import LookupNotFoundError, LookupServerError, LookupServiceError
from candidates.models.candidate import Candidate
from candidates.schemas.lookup import ElectionResult, ElectionSummary, PartySummary


class CandidateFactory:
    """
    Factory for creating Candidate test instances directly in the database.

    Bypasses the service rules, so tests can set up states the API would
    refuse (duplicates, candidates of unknown parties).
    """

    @staticmethod
    async def create(
        session: AsyncSession,
        name: str = "Jane Doe",
        party_id: int = 1,
        election_id: int = 10,
        number_election: int = 150,
    ) -> Candidate:
        """
        Create a candidate for testing.

        Args:
            session: Database session
            name: Candidate full name
            party_id: Party id
            election_id: Election id
            number_election: Election registration number

        Returns:
            Created Candidate instance
        """
        candidate = Candidate(
            name=name,
            party_id=party_id,
            election_id=election_id,
            number_election=number_election,
        )
        session.add(candidate)
        await session.flush()
        await session.refresh(candidate)
        return candidate


class FakePartyClient:
    """In-memory Party service keyed by party id."""

    def __init__(self, parties: Optional[Dict[int, int]] = None):
        """
        Args:
            parties: Mapping of party id to official party number
        """
        self.parties: Dict[int, PartySummary] = {}
        self.failures: Dict[int, LookupServiceError] = {}
        self.calls: List[int] = []
        for party_id, number in (parties or {}).items():
            self.add_party(party_id, number)

    def add_party(self, party_id: int, number: int) -> PartySummary:
        party = PartySummary(
            id=party_id,
            code=f"P{party_id}",
            name=f"Party {party_id}",
            number=number,
        )
        self.parties[party_id] = party
        return party

    def fail(self, party_id: int, error: Optional[LookupServiceError] = None) -> None:
        """Make lookups of party_id fail (server error by default)."""
        self.failures[party_id] = error or LookupServerError(message="Party service error")

    async def get_by_id(self, party_id: int) -> PartySummary:
        self.calls.append(party_id)
        if party_id in self.failures:
            raise self.failures[party_id]
        if party_id not in self.parties:
            raise LookupNotFoundError(message="Party record not found")
        return self.parties[party_id]


class FakeElectionClient:
    """In-memory Election service with per-election vote totals."""

    def __init__(self, elections: Optional[Iterable[int]] = None):
        """
        Args:
            elections: Ids of the elections that exist
        """
        self.elections: Dict[int, ElectionSummary] = {}
        self.votes: Dict[int, int] = {}
        self.failures: Dict[int, LookupServiceError] = {}
        self.result_failures: Dict[int, LookupServiceError] = {}
        for election_id in elections or []:
            self.add_election(election_id)

    def add_election(self, election_id: int, total_votes: int = 0) -> ElectionSummary:
        election = ElectionSummary(
            id=election_id,
            year=2026,
            state_code="RS",
            description=f"Election {election_id}",
        )
        self.elections[election_id] = election
        self.votes[election_id] = total_votes
        return election

    def set_votes(self, election_id: int, total_votes: int) -> None:
        self.votes[election_id] = total_votes

    def fail(self, election_id: int, error: Optional[LookupServiceError] = None) -> None:
        """Make election lookups of election_id fail (server error by default)."""
        self.failures[election_id] = error or LookupServerError(message="Election service error")

    def fail_result(self, election_id: int, error: Optional[LookupServiceError] = None) -> None:
        """Make result lookups of election_id fail (server error by default)."""
        self.result_failures[election_id] = error or LookupServerError(
            message="Election service error"
        )

    async def get_by_id(self, election_id: int) -> ElectionSummary:
        if election_id in self.failures:
            raise self.failures[election_id]
        if election_id not in self.elections:
            raise LookupNotFoundError(message="Election record not found")
        return self.elections[election_id]

    async def get_result(self, election_id: int) -> ElectionResult:
        if election_id in self.result_failures:
            raise self.result_failures[election_id]
        if election_id not in self.elections:
            raise LookupNotFoundError(message="Election record not found")
        return ElectionResult(total_votes=self.votes.get(election_id, 0))
