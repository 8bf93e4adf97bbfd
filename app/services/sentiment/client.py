"""Sends request candidates to the AI backend until one succeeds."""

import logging
from collections.abc import Sequence

import httpx

from app.services.sentiment.constants import NO_ATTEMPT_STATUS
from app.services.sentiment.exceptions import ProviderConnectionError
from app.services.sentiment.types import Candidate

logger = logging.getLogger(__name__)


class ProviderClient:
    """POSTs candidates strictly in order, stopping at the first 2xx.

    The injected httpx client is shared across requests; this class keeps
    only the bearer token, applied per call.
    """

    def __init__(self, http_client: httpx.AsyncClient, token: str | None = None):
        self.http_client = http_client
        self.token = token

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def send(self, candidates: Sequence[Candidate]) -> httpx.Response:
        """
        Attempt each candidate until one returns a success status.

        Returns:
            The first successful response, otherwise the last attempted one
            (a synthetic 404 if nothing was attempted)

        Raises:
            ProviderConnectionError: On any transport failure; remaining
                candidates are not tried
        """
        headers = self._headers()
        response: httpx.Response | None = None

        for attempt, candidate in enumerate(candidates, start=1):
            if candidate.only_after_status is not None and (
                response is None or response.status_code != candidate.only_after_status
            ):
                continue

            try:
                response = await self.http_client.post(
                    candidate.url, json=candidate.payload, headers=headers
                )
            except httpx.RequestError as e:
                logger.error(f"[sentiment] Request to {candidate.url} failed: {e}")
                raise ProviderConnectionError(
                    str(e) or e.__class__.__name__, url=candidate.url
                ) from e

            if response.is_success:
                logger.debug(f"[sentiment] Attempt {attempt} succeeded: {candidate.url}")
                return response

            logger.info(
                f"[sentiment] Attempt {attempt} got HTTP {response.status_code}: {candidate.url}"
            )

        if response is None:
            return httpx.Response(NO_ATTEMPT_STATUS, text="No request candidates to attempt")
        return response
