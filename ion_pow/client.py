"""
Proof-of-work client for ION anchoring operations.

Fetches a challenge, solves it and submits the operation with the proof
headers. With challenges disabled the operation is posted directly.
"""

import random
from collections.abc import Callable

import httpx

from ion_pow.config import Settings
from ion_pow.logging_config import get_logger
from ion_pow.services.challenge_service import ChallengeClient
from ion_pow.services.pow_service import HashFunc, NonceSolver
from ion_pow.services.submission_service import SolutionSubmitter

logger = get_logger(__name__)


class IonProofOfWork:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        challenge_enabled: bool | None = None,
        challenge_endpoint: str | None = None,
        solution_endpoint: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
        hash_func: HashFunc | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        settings = settings or Settings.from_defaults()
        overrides = {
            "challenge_enabled": challenge_enabled,
            "challenge_endpoint": challenge_endpoint or None,
            "solution_endpoint": solution_endpoint or None,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if overrides:
            settings = settings.model_copy(update=overrides)
        self._settings = settings

        self._challenge_client = ChallengeClient(
            settings.challenge_endpoint,
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

        solver_kwargs = {"rng": rng}
        if hash_func is not None:
            solver_kwargs["hash_func"] = hash_func
        if clock is not None:
            solver_kwargs["clock"] = clock
        self._solver = NonceSolver(**solver_kwargs)

        self._submitter = SolutionSubmitter(
            settings.solution_endpoint,
            challenge_enabled=settings.challenge_enabled,
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def challenge_enabled(self) -> bool:
        return self._settings.challenge_enabled

    async def submit(self, request_json: str) -> str:
        """
        Submit an anchoring operation and return the raw response body.

        Any failure aborts the remaining steps and propagates unchanged.
        """
        if not self.challenge_enabled:
            logger.debug("pow_challenge_disabled", endpoint=self._settings.solution_endpoint)
            return await self._submitter.submit(request_json)

        challenge = await self._challenge_client.retrieve_challenge()
        answer_nonce = await self._solver.solve(request_json, challenge)
        return await self._submitter.submit(
            request_json,
            challenge_nonce=challenge.challenge_nonce,
            answer_nonce=answer_nonce,
        )


IonPoW = IonProofOfWork
