import asyncio
import random
import time
from collections.abc import Callable

from ion_pow.exceptions import DeadlineExceeded
from ion_pow.logging_config import get_logger
from ion_pow.schemas.challenge import AnswerNonce, ChallengeResult
from ion_pow.services.crypto_utils import argon2id_hex

logger = get_logger(__name__)

HEX_DIGITS = "0123456789abcdef"
MAX_NONCE_LENGTH = 500  # exclusive

HashFunc = Callable[[bytes, bytes], str]


def to_base10_string(base16: str) -> str:
    """
    Encode a hex nonce the way the anchoring service expects in Answer-Nonce.

    Despite the name this is not a numeric conversion: each UTF-8 byte of the
    hex digit string is rendered as two hex characters ("a1" -> "6131").
    """
    return base16.encode("utf-8").hex()


def generate_nonce(rng: random.Random) -> AnswerNonce:
    """Generate a random hex nonce of random length in [0, 500)."""
    size = rng.randrange(MAX_NONCE_LENGTH)
    base16 = "".join(rng.choice(HEX_DIGITS) for _ in range(size))
    return AnswerNonce(base16=base16, base10=to_base10_string(base16))


class NonceSolver:
    """
    Brute-force search for an answer nonce that satisfies a challenge.

    Candidates are hashed one at a time until the digest is not greater than
    the challenge's largest allowed hash or the validity window runs out.
    The deadline is checked between hashes only, so the last hash may finish
    after the nominal deadline.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        hash_func: HashFunc = argon2id_hex,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._rng = rng or random.SystemRandom()
        self._hash_func = hash_func
        self._clock = clock

    def _elapsed_ms(self, start: float) -> float:
        return (self._clock() - start) * 1000

    async def solve(self, payload: str, challenge: ChallengeResult) -> AnswerNonce:
        logger.debug("pow_solving", payload_length=len(payload))
        salt = bytes.fromhex(challenge.challenge_nonce)
        largest_allowed_hash = challenge.largest_allowed_hash
        window_ms = challenge.valid_duration_in_milliseconds

        start = self._clock()
        attempts = 0
        while True:
            answer_nonce = generate_nonce(self._rng)
            password = (answer_nonce.base16 + payload).encode("utf-8")
            current_hash = await asyncio.to_thread(self._hash_func, password, salt)
            attempts += 1
            logger.debug("pow_answer_hash_computed", answer_hash=current_hash)
            if not (
                current_hash > largest_allowed_hash and self._elapsed_ms(start) < window_ms
            ):
                break

        # Re-test elapsed time: a success found right at the deadline still counts
        if self._elapsed_ms(start) > window_ms:
            logger.warning(
                "pow_deadline_exceeded",
                valid_duration_in_minutes=challenge.valid_duration_in_minutes,
                attempts=attempts,
            )
            raise DeadlineExceeded(challenge.valid_duration_in_minutes, int(start * 1000))

        logger.debug(
            "pow_solved",
            largest_allowed_hash=largest_allowed_hash,
            answer_hash=current_hash,
            attempts=attempts,
            duration_ms=round(self._elapsed_ms(start), 2),
        )
        return answer_nonce
