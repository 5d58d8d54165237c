"""
FastAPI dependencies for the candidate API.

WHY: Route handlers receive the candidate service through dependency
injection, so tests can swap the peer service clients or the database
session through app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from candidates.core.config import settings
from candidates.db.session import get_db
from candidates.services.candidate_service import CandidateService
from candidates.services.election_client import ElectionClient
from candidates.services.party_client import PartyClient


def get_party_client() -> PartyClient:
    """Party service client built from settings."""
    return PartyClient(
        base_url=settings.PARTY_SERVICE_URL,
        timeout=settings.LOOKUP_TIMEOUT,
    )


def get_election_client() -> ElectionClient:
    """Election service client built from settings."""
    return ElectionClient(
        base_url=settings.ELECTION_SERVICE_URL,
        timeout=settings.LOOKUP_TIMEOUT,
    )


async def get_candidate_service(
    db: AsyncSession = Depends(get_db),
    party_client: PartyClient = Depends(get_party_client),
    election_client: ElectionClient = Depends(get_election_client),
) -> CandidateService:
    """
    Candidate service bound to the request's database session.

    Usage:
        @router.get("/candidates")
        async def list_candidates(service: CandidateService = Depends(get_candidate_service)):
            return await service.list_candidates()
    """
    return CandidateService(db, party_client, election_client)
