"""Base class for phonetic encoders.

Defines the interface every encoder implements, so alternative phonetic
tables can be swapped in behind the same ``encode``/``encode_full`` calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sound_index.config import EncoderSettings


class PhoneticEncoder(ABC):
    """Abstract base class for phonetic encoders.

    Subclasses must be stateless apart from their settings so that one
    instance can be shared between threads.
    """

    def __init__(self, settings: EncoderSettings | None = None):
        self.settings = settings if settings is not None else EncoderSettings()

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm name, matching an ``EncoderType`` value."""
        pass

    @abstractmethod
    def encode(self, text: str) -> str:
        """Encode text using the configured mode.

        Args:
            text: Word or short phrase

        Returns:
            Phonetic code, or "" if ``text`` has no letters
        """
        pass

    @abstractmethod
    def encode_full(self, text: str) -> str:
        """Encode text keeping every computed symbol."""
        pass

    def equal(self, left: str, right: str) -> bool:
        """Check whether two strings share a phonetic code."""
        return self.encode(left) == self.encode(right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.settings!r})"
