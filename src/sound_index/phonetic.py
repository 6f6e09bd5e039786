"""Soundex phonetic encoding.

Soundex keeps the first letter of a word and encodes the following
consonants by sound, so that names which sound alike share a code
(e.g. "Robert" and "Rupert" both become "R163").

Only basic Latin letters take part, after case mapping; anything else
in the input is dropped before encoding.
"""

from __future__ import annotations

from string import ascii_letters

from sound_index.base import PhoneticEncoder
from sound_index.config import EncoderSettings, EncoderType
from sound_index.errors import ConfigurationError, ValidationError
from sound_index.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LENGTH = 4

_GROUPS = {
    "0": "aeiouyhw",
    "1": "bfpv",
    "2": "cgjkqsxz",
    "3": "dt",
    "4": "l",
    "5": "mn",
    "6": "r",
}

# Letter -> digit class
SOUNDEX_CODES: dict[str, str] = {
    letter: digit for digit, letters in _GROUPS.items() for letter in letters
}

# Class 0 letters that do not break a run of same-class consonants
_TRANSPARENT = frozenset("hw")

_LETTERS = frozenset(ascii_letters)


def _letters(text: str) -> str:
    if not isinstance(text, str):
        raise ValidationError(
            "Soundex input must be a string",
            context={"type": type(text).__name__},
        )
    # Case-map first: some non-ASCII characters map onto ASCII letters (ß -> SS)
    folded = text.upper().lower()
    return "".join(c for c in folded if c in _LETTERS)


def _digits(letters: str) -> str:
    last = SOUNDEX_CODES[letters[0]]
    digits = []

    for char in letters[1:]:
        code = SOUNDEX_CODES[char]
        if code == "0":
            # Vowels reset the duplicate check, h and w don't
            if char not in _TRANSPARENT:
                last = code
            continue
        if code != last:
            digits.append(code)
            last = code

    return "".join(digits)


def soundex_digits(text: str) -> str:
    """Compute the Soundex digit stream of ``text``, without the leading letter.

    Args:
        text: Word or short phrase

    Returns:
        Every emitted digit, untruncated; "" if ``text`` has fewer than two letters
    """
    letters = _letters(text)
    if not letters:
        return ""
    return _digits(letters)


def _soundex(text: str, length: int | None) -> str:
    letters = _letters(text)
    if not letters:
        return ""

    digits = _digits(letters)
    if length is not None:
        width = length - 1
        digits = digits[:width].ljust(width, "0")

    return letters[0].upper() + digits


def encode(text: str) -> str:
    """Generate the four-character Soundex code for ``text``.

    Args:
        text: Word or short phrase

    Returns:
        First letter plus three digits (e.g. "A261" for "Ashcraft"),
        or "" if ``text`` contains no letters
    """
    return _soundex(text, DEFAULT_LENGTH)


def encode_full(text: str) -> str:
    """Generate the untruncated Soundex code for ``text``.

    Args:
        text: Word or short phrase

    Returns:
        First letter plus every computed digit (e.g. "H4643" for
        "hello world"), or "" if ``text`` contains no letters
    """
    return _soundex(text, None)


def equal(left: str, right: str, full: bool = False) -> bool:
    """Check whether two strings have the same Soundex code.

    Args:
        left: First string
        right: Second string
        full: Compare full-length codes instead of four-character ones

    Returns:
        True if the codes match
    """
    func = encode_full if full else encode
    return func(left) == func(right)


class Soundex(PhoneticEncoder):
    """Soundex encoder bound to a set of ``EncoderSettings``.

    Example:
        encoder = Soundex(EncoderSettings(length=6))
        encoder.encode("Jefferson")  # "J16250"
    """

    def __init__(self, settings: EncoderSettings | None = None):
        super().__init__(settings)
        if self.settings.algorithm != EncoderType.SOUNDEX:
            raise ConfigurationError(
                "Soundex encoder given settings for another algorithm",
                context={"algorithm": str(self.settings.algorithm)},
            )
        logger.debug(
            "Created Soundex encoder",
            extra={"length": self.settings.length, "full": self.settings.full},
        )

    @property
    def name(self) -> str:
        return EncoderType.SOUNDEX.value

    def encode(self, text: str) -> str:
        if self.settings.full:
            return _soundex(text, None)
        return _soundex(text, self.settings.length)

    def encode_full(self, text: str) -> str:
        return _soundex(text, None)


def get_encoder(settings: EncoderSettings | None = None) -> PhoneticEncoder:
    """Factory function to get the encoder for the configured algorithm.

    Args:
        settings: Encoder settings; defaults apply when omitted

    Returns:
        PhoneticEncoder instance based on settings

    Raises:
        ConfigurationError: If the algorithm is not supported
    """
    if settings is None:
        settings = EncoderSettings()

    if settings.algorithm == EncoderType.SOUNDEX:
        return Soundex(settings)

    raise ConfigurationError(
        f"Unsupported phonetic algorithm: {settings.algorithm}",
        context={"algorithm": str(settings.algorithm)},
    )
