from ion_pow.schemas.challenge import AnswerNonce, ChallengeBody, ChallengeResult

__all__ = ["AnswerNonce", "ChallengeBody", "ChallengeResult"]
