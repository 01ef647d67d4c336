"""Proof-of-work challenge retrieval."""

import httpx
from pydantic import ValidationError

from ion_pow.exceptions import ChallengeUnavailable, InvalidChallenge
from ion_pow.logging_config import get_logger
from ion_pow.schemas.challenge import ChallengeBody, ChallengeResult

logger = get_logger(__name__)


class ChallengeClient:
    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def retrieve_challenge(self) -> ChallengeResult:
        """
        Fetch a fresh challenge from the challenge endpoint.

        Raises ChallengeUnavailable on a non-2xx response and InvalidChallenge
        when the body is not a well-formed challenge. Never retries.
        """
        logger.debug("pow_challenge_requested", endpoint=self._endpoint)

        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            response = await client.get(self._endpoint)

        if not response.is_success:
            logger.error(
                "pow_challenge_unavailable",
                endpoint=self._endpoint,
                status_code=response.status_code,
            )
            raise ChallengeUnavailable(self._endpoint, response.status_code)

        try:
            body = ChallengeBody.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("pow_challenge_invalid", endpoint=self._endpoint, errors=e.error_count())
            raise InvalidChallenge(self._endpoint, str(e)) from e

        logger.debug("pow_challenge_received", challenge=body.model_dump(by_alias=True))
        return ChallengeResult.from_body(body)
