"""Submission of anchoring operations to the solution endpoint."""

import httpx

from ion_pow.exceptions import ProtocolMisuse, SubmissionRejected
from ion_pow.logging_config import get_logger
from ion_pow.schemas.challenge import AnswerNonce

logger = get_logger(__name__)

CHALLENGE_NONCE_HEADER = "Challenge-Nonce"
ANSWER_NONCE_HEADER = "Answer-Nonce"


class SolutionSubmitter:
    def __init__(
        self,
        endpoint: str,
        *,
        challenge_enabled: bool = True,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._challenge_enabled = challenge_enabled
        self._timeout = timeout
        self._transport = transport

    def build_headers(
        self, challenge_nonce: str | None = None, answer_nonce: AnswerNonce | None = None
    ) -> dict[str, str]:
        """
        Build request headers for a submission.

        In challenge mode both nonces are required and sent as proof headers.
        Without challenges only the content type is set.
        """
        headers = {"Content-Type": "application/json"}
        if not self._challenge_enabled:
            return headers

        if not challenge_nonce or answer_nonce is None:
            raise ProtocolMisuse(
                "When using a challenge the challenge and answer nonce need to be present"
            )

        headers[CHALLENGE_NONCE_HEADER] = challenge_nonce
        headers[ANSWER_NONCE_HEADER] = answer_nonce.base10
        return headers

    async def submit(
        self,
        payload: str,
        challenge_nonce: str | None = None,
        answer_nonce: AnswerNonce | None = None,
    ) -> str:
        """
        POST the payload verbatim and return the raw response text.

        The endpoint does not always answer with JSON, so the body is read as
        text and left for the caller to parse.
        """
        headers = self.build_headers(challenge_nonce, answer_nonce)

        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            response = await client.post(
                self._endpoint,
                content=payload.encode("utf-8"),
                headers=headers,
            )

        body = response.text
        if not response.is_success:
            logger.error(
                "pow_submission_rejected",
                endpoint=self._endpoint,
                status_code=response.status_code,
            )
            raise SubmissionRejected(response.status_code, response.reason_phrase, body)

        logger.debug("pow_submission_accepted", endpoint=self._endpoint, body_length=len(body))
        return body
