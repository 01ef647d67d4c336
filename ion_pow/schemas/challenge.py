from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

HEX_BYTES_PATTERN = r"^([0-9a-fA-F]{2})+$"
# Argon2 rejects salts shorter than 8 bytes
MIN_CHALLENGE_NONCE_LENGTH = 16


class ChallengeBody(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    challenge_nonce: str = Field(
        ...,
        alias="challengeNonce",
        pattern=HEX_BYTES_PATTERN,
        min_length=MIN_CHALLENGE_NONCE_LENGTH,
        description="Hex salt for the answer hash",
    )
    valid_duration_in_minutes: int = Field(
        ..., alias="validDurationInMinutes", ge=0, description="Time budget for solving"
    )
    largest_allowed_hash: str = Field(
        ...,
        alias="largestAllowedHash",
        pattern=HEX_BYTES_PATTERN,
        description="Difficulty target as a hex string",
    )


class ChallengeResult(ChallengeBody):
    valid_duration_in_milliseconds: int

    @classmethod
    def from_body(cls, body: ChallengeBody) -> "ChallengeResult":
        return cls(
            challenge_nonce=body.challenge_nonce,
            valid_duration_in_minutes=body.valid_duration_in_minutes,
            largest_allowed_hash=body.largest_allowed_hash,
            valid_duration_in_milliseconds=body.valid_duration_in_minutes * 60 * 1000,
        )


@dataclass(frozen=True, slots=True)
class AnswerNonce:
    base16: str
    base10: str
