"""
Election service client.

WHAT: Reads election records and vote totals from the Election service.
"""

from candidates.schemas.lookup import ElectionResult, ElectionSummary
from candidates.services.lookup_client import LookupClient


class ElectionClient(LookupClient):
    """Read-only client for the Election service."""

    service_name = "Election"

    async def get_by_id(self, election_id: int) -> ElectionSummary:
        """
        Fetch one election.

        Raises:
            LookupNotFoundError: If the election doesn't exist
            LookupServerError: On any other failure
        """
        return await self._get_model(f"/v1/election/{election_id}", ElectionSummary)

    async def get_result(self, election_id: int) -> ElectionResult:
        """
        Fetch the vote totals recorded for an election.

        Raises:
            LookupNotFoundError: If the election doesn't exist
            LookupServerError: On any other failure
        """
        return await self._get_model(f"/v1/result/election/{election_id}", ElectionResult)
