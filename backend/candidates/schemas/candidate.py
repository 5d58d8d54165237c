"""
Pydantic schemas for candidate endpoints.

WHAT: Request/response schemas for the candidate API.

WHY: Schemas define the API contract:
1. Parse incoming request data
2. Document API for OpenAPI/Swagger
3. Control which fields are exposed in responses

HOW: Input fields are all optional on purpose. A missing name, party or
election is reported by the candidate service with its own message and
error kind, the same way whether the service is reached over HTTP or
called directly.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from candidates.models.candidate import Candidate
from candidates.schemas.lookup import ElectionSummary, PartySummary


# Range of the BIGINT columns that ids and numbers are stored in. Values
# outside it are rejected as malformed input before reaching the database.
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class CandidateInput(BaseModel):
    """
    Candidate create/update request schema.

    Update replaces all four fields, so the same schema serves both.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "party_id": 1,
                "election_id": 10,
                "number_election": 150,
            }
        }
    )

    name: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Candidate full name (first and last name)",
    )
    party_id: Optional[int] = Field(
        default=None,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        description="Party id in the Party service",
    )
    election_id: Optional[int] = Field(
        default=None,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        description="Election id in the Election service",
    )
    number_election: Optional[int] = Field(
        default=None,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        description="Election registration number, starting with the party number",
    )


class CandidateResponse(BaseModel):
    """
    Candidate response schema.

    WHAT: A stored candidate with the party and election it references.
    """

    id: int
    name: str
    number_election: int
    party_id: int
    election_id: int
    party: Optional[PartySummary] = None
    election: Optional[ElectionSummary] = None

    @classmethod
    def from_candidate(
        cls,
        candidate: Candidate,
        party: Optional[PartySummary] = None,
        election: Optional[ElectionSummary] = None,
    ) -> "CandidateResponse":
        """
        Build a response from a Candidate model and its lookups.

        Args:
            candidate: Stored candidate
            party: Party summary for candidate.party_id
            election: Election summary for candidate.election_id

        Returns:
            CandidateResponse instance
        """
        return cls(
            id=candidate.id,
            name=candidate.name,
            number_election=candidate.number_election,
            party_id=candidate.party_id,
            election_id=candidate.election_id,
            party=party,
            election=election,
        )


class MessageResponse(BaseModel):
    """Generic confirmation message."""

    message: str
