"""
Party service client.

WHAT: Reads party records from the Party service.
"""

from candidates.schemas.lookup import PartySummary
from candidates.services.lookup_client import LookupClient


class PartyClient(LookupClient):
    """Read-only client for the Party service."""

    service_name = "Party"

    async def get_by_id(self, party_id: int) -> PartySummary:
        """
        Fetch one party.

        Args:
            party_id: Party id

        Returns:
            PartySummary with the party's official number

        Raises:
            LookupNotFoundError: If the party doesn't exist
            LookupServerError: On any other failure
        """
        return await self._get_model(f"/v1/party/{party_id}", PartySummary)
