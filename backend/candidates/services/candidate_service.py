"""
Candidate Service.

WHAT: Business logic for candidate registration.

WHY: The service layer is the single authority for candidate rules:
1. Input validation (full name, party number prefix, references)
2. Registration uniqueness per election
3. The election lock: once an election has votes, its candidates can't
   be moved or deleted
4. Enrichment of stored candidates with party and election summaries

HOW: Orchestrates CandidateDAO and the two lookup clients. Every check
runs before the single write of an operation, so a rejected request
leaves the store untouched. The checks are read-then-write without a
lock: two concurrent creates for the same number and election can both
pass the duplicate check.

Lookup failures of either kind (not found, server error) are reported as
InvalidReferenceError on every path: validation, election lock and
enrichment alike.
"""

import logging
from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from candidates.core.exceptions import (
    CandidateNotFoundError,
    CandidateValidationError,
    DuplicateCandidateError,
    ElectionLockedError,
    InvalidArgumentError,
    InvalidReferenceError,
    LookupServiceError,
)
from candidates.dao.candidate import CandidateDAO
from candidates.models.candidate import Candidate
from candidates.schemas.candidate import CandidateInput, CandidateResponse, MessageResponse
from candidates.schemas.lookup import ElectionSummary, PartySummary
from candidates.services.election_client import ElectionClient
from candidates.services.party_client import PartyClient


logger = logging.getLogger(__name__)

MESSAGE_INVALID_ID = "Invalid id"
MESSAGE_CANDIDATE_NOT_FOUND = "Candidate not found"
MESSAGE_INVALID_NAME = "Invalid name"
MESSAGE_INVALID_NUMBER_ELECTION = "Invalid number election"
MESSAGE_INVALID_PARTY = "Invalid party"
MESSAGE_NUMBER_NOT_IN_PARTY = "Number doesn't belong to party"
MESSAGE_INVALID_ELECTION_ID = "Invalid election id"
MESSAGE_INVALID_ELECTION = "Invalid election"
MESSAGE_INVALID_PARTY_OR_ELECTION = "Invalid party or election"
MESSAGE_DUPLICATE_CANDIDATE = "Duplicate candidate"
MESSAGE_ELECTION_HAS_VOTES = "This election already has votes"
MESSAGE_CANDIDATE_DELETED = "Candidate deleted"

MIN_NAME_LENGTH = 5


class CandidateService:
    """
    Service for candidate CRUD operations.
    """

    def __init__(
        self,
        session: AsyncSession,
        party_client: PartyClient,
        election_client: ElectionClient,
    ):
        """
        Initialize CandidateService.

        Args:
            session: Async database session
            party_client: Party service client
            election_client: Election service client
        """
        self.session = session
        self.candidate_dao = CandidateDAO(session)
        self.party_client = party_client
        self.election_client = election_client

    # =========================================================================
    # Queries
    # =========================================================================

    async def list_candidates(self) -> List[CandidateResponse]:
        """
        List every candidate with its party and election.

        Raises:
            InvalidReferenceError: If any party or election lookup fails
        """
        candidates = await self.candidate_dao.list_all()
        return [await self._to_response(candidate) for candidate in candidates]

    async def get_candidate(self, candidate_id: Optional[int]) -> CandidateResponse:
        """
        Get one candidate with its party and election.

        Raises:
            InvalidArgumentError: If candidate_id is None
            CandidateNotFoundError: If no such candidate exists
            InvalidReferenceError: If the party or election lookup fails
        """
        candidate = await self._get_existing(candidate_id)
        return await self._to_response(candidate)

    # =========================================================================
    # Mutations
    # =========================================================================

    async def create_candidate(self, data: CandidateInput) -> CandidateResponse:
        """
        Register a new candidate.

        Args:
            data: Candidate input

        Returns:
            The stored candidate with its party and election

        Raises:
            InvalidArgumentError: If a required field is missing
            CandidateValidationError: If the name or number breaks a rule
            InvalidReferenceError: If the party or election can't be resolved
            DuplicateCandidateError: If the number is taken in the election
        """
        party, election = await self.validate_input(data)
        await self._check_duplicate(data, None)

        candidate = await self.candidate_dao.create(
            name=data.name,
            party_id=data.party_id,
            election_id=data.election_id,
            number_election=data.number_election,
        )

        logger.info(
            "Created candidate %s (number %s, election %s)",
            candidate.id,
            candidate.number_election,
            candidate.election_id,
        )
        return CandidateResponse.from_candidate(candidate, party=party, election=election)

    async def update_candidate(
        self, candidate_id: Optional[int], data: CandidateInput
    ) -> CandidateResponse:
        """
        Replace the four mutable fields of a candidate.

        The election lock is checked against the candidate's current
        election, before the new values are written.

        Raises:
            InvalidArgumentError: If candidate_id or a required field is missing
            CandidateValidationError: If the name or number breaks a rule
            InvalidReferenceError: If a party or election can't be resolved
            DuplicateCandidateError: If another candidate holds the number
            CandidateNotFoundError: If no such candidate exists
            ElectionLockedError: If the current election already has votes
        """
        if candidate_id is None:
            raise InvalidArgumentError(message=MESSAGE_INVALID_ID)

        party, election = await self.validate_input(data)
        await self._check_duplicate(data, candidate_id)

        candidate = await self.candidate_dao.get_by_id(candidate_id)
        if candidate is None:
            raise CandidateNotFoundError(
                message=MESSAGE_CANDIDATE_NOT_FOUND, candidate_id=candidate_id
            )

        await self._check_election_votes(candidate.election_id)

        candidate.name = data.name
        candidate.party_id = data.party_id
        candidate.election_id = data.election_id
        candidate.number_election = data.number_election
        candidate = await self.candidate_dao.save(candidate)

        logger.info("Updated candidate %s", candidate.id)
        return CandidateResponse.from_candidate(candidate, party=party, election=election)

    async def delete_candidate(self, candidate_id: Optional[int]) -> MessageResponse:
        """
        Delete a candidate.

        Raises:
            InvalidArgumentError: If candidate_id is None
            CandidateNotFoundError: If no such candidate exists
            ElectionLockedError: If the candidate's election already has votes
        """
        candidate = await self._get_existing(candidate_id)
        await self._check_election_votes(candidate.election_id)

        await self.candidate_dao.delete_instance(candidate)

        logger.info("Deleted candidate %s", candidate_id)
        return MessageResponse(message=MESSAGE_CANDIDATE_DELETED)

    # =========================================================================
    # Rules
    # =========================================================================

    async def validate_input(
        self, data: CandidateInput
    ) -> Tuple[PartySummary, ElectionSummary]:
        """
        Validate candidate input against the local and cross-service rules.

        Checks run in a fixed order and stop at the first failure:
        name, number, party id, party number prefix, election id, election.

        Args:
            data: Candidate input

        Returns:
            The resolved party and election, reused for the response

        Raises:
            InvalidArgumentError: If a required field is missing
            CandidateValidationError: If the name or number breaks a rule
            InvalidReferenceError: If the party or election can't be resolved
        """
        if data.name is None or not data.name.strip():
            raise InvalidArgumentError(message=MESSAGE_INVALID_NAME)
        if not is_full_name(data.name):
            raise CandidateValidationError(message=MESSAGE_INVALID_NAME, name=data.name)

        if data.number_election is None:
            raise InvalidArgumentError(message=MESSAGE_INVALID_NUMBER_ELECTION)

        if data.party_id is None:
            raise InvalidArgumentError(message=MESSAGE_INVALID_PARTY)

        try:
            party = await self.party_client.get_by_id(data.party_id)
        except LookupServiceError as e:
            raise self._invalid_reference(MESSAGE_INVALID_PARTY, e, party_id=data.party_id)

        if not number_belongs_to_party(data.number_election, party.number):
            raise CandidateValidationError(
                message=MESSAGE_NUMBER_NOT_IN_PARTY,
                number_election=data.number_election,
                party_number=party.number,
            )

        if data.election_id is None:
            raise InvalidArgumentError(message=MESSAGE_INVALID_ELECTION_ID)

        try:
            election = await self.election_client.get_by_id(data.election_id)
        except LookupServiceError as e:
            raise self._invalid_reference(
                MESSAGE_INVALID_ELECTION_ID, e, election_id=data.election_id
            )

        return party, election

    async def _check_duplicate(self, data: CandidateInput, candidate_id: Optional[int]) -> None:
        """
        Reject a number already registered by another candidate in the election.

        Args:
            data: Candidate input
            candidate_id: Id of the candidate being written (None on create)

        Raises:
            DuplicateCandidateError: If another candidate holds the pair
        """
        existing = await self.candidate_dao.get_by_number_and_election(
            data.number_election, data.election_id
        )
        if existing is not None and existing.id != candidate_id:
            raise DuplicateCandidateError(
                message=MESSAGE_DUPLICATE_CANDIDATE,
                number_election=data.number_election,
                election_id=data.election_id,
            )

    async def _check_election_votes(self, election_id: int) -> None:
        """
        Reject changes to candidates of an election that has votes.

        Raises:
            ElectionLockedError: If the election has recorded votes
            InvalidReferenceError: If the result lookup fails
        """
        try:
            result = await self.election_client.get_result(election_id)
        except LookupServiceError as e:
            raise self._invalid_reference(MESSAGE_INVALID_ELECTION, e, election_id=election_id)

        if result.total_votes > 0:
            raise ElectionLockedError(
                message=MESSAGE_ELECTION_HAS_VOTES,
                election_id=election_id,
                total_votes=result.total_votes,
            )

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _get_existing(self, candidate_id: Optional[int]) -> Candidate:
        if candidate_id is None:
            raise InvalidArgumentError(message=MESSAGE_INVALID_ID)

        candidate = await self.candidate_dao.get_by_id(candidate_id)
        if candidate is None:
            raise CandidateNotFoundError(
                message=MESSAGE_CANDIDATE_NOT_FOUND, candidate_id=candidate_id
            )
        return candidate

    async def _to_response(self, candidate: Candidate) -> CandidateResponse:
        """
        Enrich a stored candidate with its party and election.

        Raises:
            InvalidReferenceError: If either lookup fails
        """
        try:
            party = await self.party_client.get_by_id(candidate.party_id)
            election = await self.election_client.get_by_id(candidate.election_id)
        except LookupServiceError as e:
            raise self._invalid_reference(
                MESSAGE_INVALID_PARTY_OR_ELECTION, e, candidate_id=candidate.id
            )

        return CandidateResponse.from_candidate(candidate, party=party, election=election)

    @staticmethod
    def _invalid_reference(
        message: str, cause: LookupServiceError, **context
    ) -> InvalidReferenceError:
        logger.warning("%s: %s", message, cause.message)
        return InvalidReferenceError(
            message=message,
            upstream_error=cause.__class__.__name__,
            **context,
        )


def is_full_name(name: str) -> bool:
    """
    Check that a name looks like a first and last name.

    The trimmed name needs at least MIN_NAME_LENGTH characters and an
    interior space.
    """
    trimmed = name.strip()
    return len(trimmed) >= MIN_NAME_LENGTH and " " in trimmed


def number_belongs_to_party(number_election: int, party_number: int) -> bool:
    """Check that the decimal form of the number starts with the party number."""
    return str(number_election).startswith(str(party_number))
