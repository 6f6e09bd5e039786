"""Sound Index - Soundex phonetic codes for fuzzy name matching.

Maps a word to a short code approximating its English pronunciation:
"Robert" and "Rupert" both encode to "R163".

    >>> from sound_index import encode, encode_full
    >>> encode("hello world")
    'H464'
    >>> encode_full("hello world")
    'H4643'
"""

from sound_index.base import PhoneticEncoder
from sound_index.config import EncoderSettings, EncoderType, load_settings, save_settings
from sound_index.errors import (
    ConfigurationError,
    ResourceError,
    SoundIndexError,
    ValidationError,
)
from sound_index.phonetic import (
    Soundex,
    encode,
    encode_full,
    equal,
    get_encoder,
    soundex_digits,
)

__version__ = "0.1.0"

__all__ = [
    "PhoneticEncoder",
    "Soundex",
    "EncoderSettings",
    "EncoderType",
    "load_settings",
    "save_settings",
    "SoundIndexError",
    "ValidationError",
    "ConfigurationError",
    "ResourceError",
    "encode",
    "encode_full",
    "equal",
    "get_encoder",
    "soundex_digits",
]
