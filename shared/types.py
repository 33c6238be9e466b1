"""Shared type definitions."""

from enum import Enum

from pydantic import BaseModel, Field


class OTPErrorKind(str, Enum):
    """Token generation failure enumeration."""

    INVALID_LENGTH = "invalid_length"
    ENTROPY_FAILURE = "entropy_failure"


class OTPGenerationError(Exception):
    """Base class for token generation failures."""

    kind: OTPErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidLengthError(OTPGenerationError, ValueError):
    """Requested token length is outside the supported bounds.

    Raised before any entropy is drawn. Retrying without changing the
    length will fail the same way.
    """

    kind = OTPErrorKind.INVALID_LENGTH

    def __init__(self, length: object) -> None:
        super().__init__("token length must be between 1 and 1000")
        self.length = length


class EntropyFailureError(OTPGenerationError):
    """The secure random source failed to produce bytes."""

    kind = OTPErrorKind.ENTROPY_FAILURE

    def __init__(self) -> None:
        super().__init__("failed to generate cryptographically secure random number")


class BenchmarkResult(BaseModel):
    """Timing for one benchmarked token length."""

    benchmark: str = Field(..., description="Benchmark name, e.g. generate_6")
    length: int = Field(..., description="Token length in digits")
    iterations: int = Field(..., description="Number of tokens generated")
    total_seconds: float = Field(..., description="Wall-clock time for all iterations")
    ns_per_token: float = Field(..., description="Mean nanoseconds per generated token")
    bytes_per_digit: float = Field(..., description="Mean entropy bytes drawn per emitted digit")
