"""
Candidate API endpoints.

WHAT: RESTful API for candidate CRUD operations.

HOW: FastAPI router delegating every operation to CandidateService.
Domain failures propagate as AppException subclasses and are turned into
JSON error responses by the registered exception handlers:
- InvalidArgumentError, and ids or numbers outside the BIGINT range -> 400
- CandidateNotFoundError -> 404
- CandidateValidationError, DuplicateCandidateError,
  ElectionLockedError, InvalidReferenceError -> 422
"""

from typing import List
from fastapi import APIRouter, Depends, Path, status

from candidates.core.deps import get_candidate_service
from candidates.schemas.candidate import (
    BIGINT_MAX,
    BIGINT_MIN,
    CandidateInput,
    CandidateResponse,
    MessageResponse,
)
from candidates.services.candidate_service import CandidateService


router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get(
    "",
    response_model=List[CandidateResponse],
    status_code=status.HTTP_200_OK,
    summary="List candidates",
    description="Get every candidate with its party and election",
)
async def list_candidates(
    service: CandidateService = Depends(get_candidate_service),
) -> List[CandidateResponse]:
    """
    List candidates.

    Raises:
        InvalidReferenceError (422): If a party or election lookup fails
    """
    return await service.list_candidates()


@router.get(
    "/{candidate_id}",
    response_model=CandidateResponse,
    status_code=status.HTTP_200_OK,
    summary="Get candidate",
    description="Get a candidate by id with its party and election",
)
async def get_candidate(
    candidate_id: int = Path(..., ge=BIGINT_MIN, le=BIGINT_MAX, description="Candidate id"),
    service: CandidateService = Depends(get_candidate_service),
) -> CandidateResponse:
    """
    Get a candidate.

    Raises:
        CandidateNotFoundError (404): If the candidate doesn't exist
        InvalidReferenceError (422): If a party or election lookup fails
    """
    return await service.get_candidate(candidate_id)


@router.post(
    "",
    response_model=CandidateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create candidate",
    description="Register a candidate in an election",
)
async def create_candidate(
    data: CandidateInput,
    service: CandidateService = Depends(get_candidate_service),
) -> CandidateResponse:
    """
    Create a candidate.

    Raises:
        InvalidArgumentError (400): If a required field is missing
        CandidateValidationError (422): If the name or number breaks a rule
        DuplicateCandidateError (422): If the number is taken in the election
        InvalidReferenceError (422): If the party or election can't be resolved
    """
    return await service.create_candidate(data)


@router.put(
    "/{candidate_id}",
    response_model=CandidateResponse,
    status_code=status.HTTP_200_OK,
    summary="Update candidate",
    description="Replace the name, party, election and number of a candidate",
)
async def update_candidate(
    *,
    candidate_id: int = Path(..., ge=BIGINT_MIN, le=BIGINT_MAX, description="Candidate id"),
    data: CandidateInput,
    service: CandidateService = Depends(get_candidate_service),
) -> CandidateResponse:
    """
    Update a candidate.

    Raises:
        InvalidArgumentError (400): If a required field is missing
        CandidateNotFoundError (404): If the candidate doesn't exist
        ElectionLockedError (422): If the candidate's election has votes
        DuplicateCandidateError (422): If another candidate holds the number
    """
    return await service.update_candidate(candidate_id, data)


@router.delete(
    "/{candidate_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete candidate",
    description="Delete a candidate whose election has no votes yet",
)
async def delete_candidate(
    candidate_id: int = Path(..., ge=BIGINT_MIN, le=BIGINT_MAX, description="Candidate id"),
    service: CandidateService = Depends(get_candidate_service),
) -> MessageResponse:
    """
    Delete a candidate.

    Raises:
        CandidateNotFoundError (404): If the candidate doesn't exist
        ElectionLockedError (422): If the candidate's election has votes
    """
    return await service.delete_candidate(candidate_id)
