"""Secure random byte sources."""

import os
from abc import ABC, abstractmethod


class EntropySource(ABC):
    """Abstract base class for cryptographically secure byte sources."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Return ``size`` uniformly distributed random bytes.

        Args:
            size: Number of bytes to read

        Returns:
            Random bytes

        Raises:
            OSError: If the underlying source cannot supply randomness
        """
        pass


class OSEntropySource(EntropySource):
    """Byte source backed by the operating system CSPRNG."""

    def read(self, size: int) -> bytes:
        return os.urandom(size)


_os_source = OSEntropySource()


def default_source() -> EntropySource:
    """Get the shared OS-backed source (stateless, thread-safe)."""
    return _os_source
