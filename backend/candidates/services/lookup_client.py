"""
Shared HTTP client for the read-only peer service lookups.

WHAT: Base class for the Party and Election clients.

WHY: Both peers are reached the same way and fail the same ways. Keeping
the request and the error classification in one place gives every lookup
the same two error kinds:

- LookupNotFoundError: the peer answered 404 for the record.
- LookupServerError: anything else that went wrong (5xx or unexpected
  4xx answers, timeouts, connection errors, bodies that don't parse).

HOW: Uses httpx for async HTTP. A fresh AsyncClient is opened per call;
the current request ID is forwarded so peer logs can be correlated.
"""

import logging
from typing import Any, Dict, Type, TypeVar
from urllib.parse import urljoin

import httpx
from pydantic import BaseModel, ValidationError as PydanticValidationError

from candidates.core.exceptions import LookupNotFoundError, LookupServerError
from candidates.middleware.request_context import REQUEST_ID_HEADER, get_request_id


logger = logging.getLogger(__name__)

# Default timeout for peer service calls (seconds)
DEFAULT_TIMEOUT = 10.0

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class LookupClient:
    """
    Async HTTP client for one peer service.

    Subclasses add the typed lookup methods; this class owns the
    transport and the error boundary.
    """

    service_name: str = "peer"

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize lookup client.

        Args:
            base_url: Base URL of the peer service (e.g., http://party:8080)
            timeout: Request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        request_id = get_request_id()
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id
        return headers

    async def _get(self, endpoint: str) -> Dict[str, Any]:
        """
        GET a JSON document from the peer service.

        Args:
            endpoint: Path relative to the base URL (e.g., /v1/party/1)

        Returns:
            Parsed JSON body

        Raises:
            LookupNotFoundError: If the peer answers 404
            LookupServerError: On any other failure
        """
        url = urljoin(self._base_url + "/", endpoint.lstrip("/"))

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=False,
            ) as client:
                response = await client.get(url, headers=self._get_headers())
        except httpx.TimeoutException:
            logger.warning("%s service timed out on %s", self.service_name, endpoint)
            raise LookupServerError(
                message=f"{self.service_name} service request timed out",
                endpoint=endpoint,
                timeout=self._timeout,
            )
        except httpx.RequestError as e:
            logger.warning("%s service unreachable on %s: %s", self.service_name, endpoint, e)
            raise LookupServerError(
                message=f"{self.service_name} service connection error: {str(e)}",
                endpoint=endpoint,
            )

        if response.status_code == 404:
            raise LookupNotFoundError(
                message=f"{self.service_name} record not found",
                endpoint=endpoint,
            )

        if response.status_code >= 400:
            logger.warning(
                "%s service answered %s on %s",
                self.service_name,
                response.status_code,
                endpoint,
            )
            raise LookupServerError(
                message=f"{self.service_name} service error: HTTP {response.status_code}",
                endpoint=endpoint,
                upstream_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            raise LookupServerError(
                message=f"{self.service_name} service returned invalid JSON",
                endpoint=endpoint,
            )

        if not isinstance(data, dict):
            raise LookupServerError(
                message=f"{self.service_name} service returned an unexpected body",
                endpoint=endpoint,
            )
        return data

    async def _get_model(self, endpoint: str, schema: Type[SchemaType]) -> SchemaType:
        """
        GET a JSON document and validate it against a schema.

        Raises:
            LookupNotFoundError: If the peer answers 404
            LookupServerError: On any other failure, including a body that
                doesn't match the schema
        """
        data = await self._get(endpoint)
        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            raise LookupServerError(
                message=f"{self.service_name} service returned a malformed {schema.__name__}",
                endpoint=endpoint,
                error_count=e.error_count(),
            )
