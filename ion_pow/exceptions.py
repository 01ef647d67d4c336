"""Errors raised while solving and submitting proof-of-work operations."""

import json


class IonPowError(Exception):
    """Base class for every error raised by ion_pow."""


class ChallengeUnavailable(IonPowError):
    def __init__(self, endpoint: str, status_code: int):
        super().__init__(f"Get challenge service not available at {endpoint}")
        self.endpoint = endpoint
        self.status_code = status_code


class InvalidChallenge(IonPowError):
    def __init__(self, endpoint: str, detail: str):
        super().__init__(f"Invalid challenge received from {endpoint}: {detail}")
        self.endpoint = endpoint


class DeadlineExceeded(IonPowError):
    def __init__(self, valid_duration_in_minutes: int, start_time: int):
        super().__init__(
            f"Valid duration of {valid_duration_in_minutes} minutes "
            f"has been exceeded since {start_time}"
        )
        self.valid_duration_in_minutes = valid_duration_in_minutes
        self.start_time = start_time


class SubmissionRejected(IonPowError):
    def __init__(self, status_code: int, reason_phrase: str, body: str):
        # Body is rendered as a quoted JSON string so whitespace stays visible
        quoted = json.dumps(body, indent=2, ensure_ascii=False)
        super().__init__(f"{status_code}: {reason_phrase}. Body: {quoted}")
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body


class ProtocolMisuse(IonPowError):
    """Challenge mode is enabled but nonce data is missing at submission."""
