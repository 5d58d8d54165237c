"""
Candidate DAO.

WHAT: Database operations for candidate records.

HOW: Extends BaseDAO with the lookups the candidate service needs:
the full listing and the (number_election, election_id) duplicate probe.
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from candidates.dao.base import BaseDAO
from candidates.models.candidate import Candidate


class CandidateDAO(BaseDAO[Candidate]):
    """
    Data Access Object for Candidate model.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize CandidateDAO.

        Args:
            session: Async database session
        """
        super().__init__(Candidate, session)

    async def list_all(self) -> List[Candidate]:
        """
        Return every candidate, ordered by id.

        Returns:
            All candidate records
        """
        result = await self.session.execute(select(Candidate).order_by(Candidate.id))
        return list(result.scalars().all())

    async def get_by_number_and_election(
        self, number_election: int, election_id: int
    ) -> Optional[Candidate]:
        """
        Find the first candidate holding a registration number in an election.

        WHY: No unique constraint backs this pair, so more than one row can
        exist after concurrent writes; the lowest id is returned.

        Args:
            number_election: Election registration number
            election_id: Election id

        Returns:
            The matching candidate, or None
        """
        result = await self.session.execute(
            select(Candidate)
            .where(
                Candidate.number_election == number_election,
                Candidate.election_id == election_id,
            )
            .order_by(Candidate.id)
            .limit(1)
        )
        return result.scalar_one_or_none()
