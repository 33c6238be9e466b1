"""Numeric one-time-password token generation.

Digits are produced by rejection sampling over single bytes from a
cryptographically secure source. Each output position draws one byte per
call to the source; bytes 0-249 map to ``b % 10`` and bytes 250-255 are
discarded and redrawn. Every digit is therefore exactly uniform over 0-9,
the same guarantee ``secrets.randbelow(10)`` gives, but drawn through an
injectable ``EntropySource``.

A plain ``b % 10`` over all 256 byte values would give digits 0-5 one extra
preimage each (26/256 against 25/256 for digits 6-9). That skew is small
but not zero, so it is not used here.

Example:
    >>> token = generate(6)
    >>> len(token), token.isdigit()
    (6, True)
    >>> len(generate_default())
    6
    >>> generate(0)
    Traceback (most recent call last):
        ...
    shared.types.InvalidLengthError: token length must be between 1 and 1000
"""

import operator

from otpgen.entropy import EntropySource, default_source
from shared.config import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from shared.types import EntropyFailureError, InvalidLengthError

DIGITS = "0123456789"

# Largest multiple of 10 that fits in a byte; bytes at or above it are rejected
_REJECTION_THRESHOLD = 256 - (256 % len(DIGITS))


def _validate_length(length: int) -> int:
    """Return length as a plain int, or raise InvalidLengthError."""
    if isinstance(length, bool):
        raise InvalidLengthError(length)
    try:
        value = operator.index(length)
    except TypeError:
        raise InvalidLengthError(length) from None

    if value < MIN_LENGTH or value > MAX_LENGTH:
        raise InvalidLengthError(length)
    return value


def _draw_digit(source: EntropySource) -> str:
    """Draw bytes until one falls below the rejection threshold."""
    while True:
        try:
            chunk = source.read(1)
        except (OSError, NotImplementedError) as e:
            raise EntropyFailureError() from e

        if len(chunk) != 1:
            raise EntropyFailureError()

        value = chunk[0]
        if value < _REJECTION_THRESHOLD:
            return DIGITS[value % len(DIGITS)]


def generate(length: int, source: EntropySource | None = None) -> str:
    """Generate a cryptographically secure numeric token.

    Args:
        length: Number of digits, between MIN_LENGTH and MAX_LENGTH inclusive.
            Any integer type supporting ``__index__`` is accepted; bool is not.
        source: Byte source to draw from (defaults to the OS CSPRNG)

    Returns:
        Token of exactly ``length`` ASCII digits

    Raises:
        InvalidLengthError: If length is out of bounds (no entropy is drawn)
        EntropyFailureError: If the byte source fails
    """
    count = _validate_length(length)

    if source is None:
        source = default_source()

    return "".join(_draw_digit(source) for _ in range(count))


def generate_default(source: EntropySource | None = None) -> str:
    """Generate a token of DEFAULT_LENGTH digits."""
    return generate(DEFAULT_LENGTH, source)
