"""Cryptographically secure numeric OTP token generation."""

from otpgen.entropy import EntropySource, OSEntropySource
from otpgen.generator import generate, generate_default
from shared.config import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from shared.types import EntropyFailureError, InvalidLengthError, OTPErrorKind, OTPGenerationError

__all__ = [
    "generate",
    "generate_default",
    "MIN_LENGTH",
    "MAX_LENGTH",
    "DEFAULT_LENGTH",
    "OTPErrorKind",
    "OTPGenerationError",
    "InvalidLengthError",
    "EntropyFailureError",
    "EntropySource",
    "OSEntropySource",
]
