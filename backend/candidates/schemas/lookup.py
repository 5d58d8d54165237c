"""
Pydantic schemas for records read from the peer services.

WHAT: Summaries of Party and Election records and the election result.

WHY: The Party and Election services answer in camelCase JSON
(``stateCode``, ``totalVotes``). Validation aliases accept that shape
while the candidate API keeps serializing snake_case field names.
"""

from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PartySummary(BaseModel):
    """
    Party record as returned by the Party service.

    ``number`` is the party's official number; every candidate number
    in the party starts with it.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {"id": 1, "code": "PDT", "name": "Partido Exemplo", "number": 15}
        },
    )

    id: Optional[int] = Field(default=None, description="Party id")
    code: Optional[str] = Field(default=None, description="Party acronym")
    name: Optional[str] = Field(default=None, description="Party name")
    number: int = Field(..., description="Official party number")


class ElectionSummary(BaseModel):
    """Election record as returned by the Election service."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = Field(default=None, description="Election id")
    year: Optional[int] = Field(default=None, description="Election year")
    state_code: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("stateCode", "state_code"),
        description="State code the election runs in",
    )
    description: Optional[str] = Field(default=None, description="Election description")


class ElectionResult(BaseModel):
    """Vote totals for one election."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total_votes: int = Field(
        default=0,
        validation_alias=AliasChoices("totalVotes", "total_votes"),
        description="Votes recorded so far",
    )
