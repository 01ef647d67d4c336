import logging

from ion_pow.client import IonPoW, IonProofOfWork
from ion_pow.config import Settings
from ion_pow.exceptions import (
    ChallengeUnavailable,
    DeadlineExceeded,
    InvalidChallenge,
    IonPowError,
    ProtocolMisuse,
    SubmissionRejected,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChallengeUnavailable",
    "DeadlineExceeded",
    "InvalidChallenge",
    "IonPoW",
    "IonPowError",
    "IonProofOfWork",
    "ProtocolMisuse",
    "Settings",
    "SubmissionRejected",
]
