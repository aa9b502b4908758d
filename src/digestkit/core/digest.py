"""Hex-encoded MD5/SHA digests of text, always hashed as UTF-8 bytes"""

import hashlib
from enum import Enum
from typing import Callable, Optional, Union


class Algorithm(str, Enum):
    """Supported digest algorithms; values are hashlib names."""
    md5    = "md5"
    sha1   = "sha1"
    sha256 = "sha256"
    sha512 = "sha512"

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        return self.digest_size * 2


_DIGEST_SIZES: dict[Algorithm, int] = {
    Algorithm.md5:    16,
    Algorithm.sha1:   20,
    Algorithm.sha256: 32,
    Algorithm.sha512: 64,
}


class DigestCause(str, Enum):
    """Why a digest could not be produced."""
    null_input            = "null_input"
    unsupported_algorithm = "unsupported_algorithm"
    unsupported_encoding  = "unsupported_encoding"
    unexpected            = "unexpected"


_MESSAGES: dict[DigestCause, str] = {
    DigestCause.null_input:            "Null input was supplied for digest generation.",
    DigestCause.unsupported_algorithm: "An invalid algorithm was configured for digest generation.",
    DigestCause.unsupported_encoding:  "An invalid character encoding was configured for digest generation.",
    DigestCause.unexpected:            "An unexpected exception occurred during digest generation.",
}


class DigestError(ValueError):
    """Invalid argument for digest generation. `cause` tells the failure kinds apart."""

    def __init__(self, cause: DigestCause):
        super().__init__(_MESSAGES[cause])
        self.cause = cause

    def __reduce__(self):
        # args holds the message, not the cause
        return (type(self), (self.cause,))


def md5_hex(text: Optional[str]) -> str:
    """Return the 32-char lowercase hex MD5 digest of text."""
    return _convert_hash_digest(text, Algorithm.md5)


def sha1_hex(text: Optional[str]) -> str:
    """Return the 40-char lowercase hex SHA-1 digest of text.

    e.g. sha1_hex("test") -> "a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"
    """
    return _convert_hash_digest(text, Algorithm.sha1)


def sha256_hex(text: Optional[str]) -> str:
    """Return the 64-char lowercase hex SHA-256 digest of text."""
    return _convert_hash_digest(text, Algorithm.sha256)


def sha512_hex(text: Optional[str]) -> str:
    """Return the 128-char lowercase hex SHA-512 digest of text."""
    return _convert_hash_digest(text, Algorithm.sha512)


DIGESTS: dict[Algorithm, Callable[[Optional[str]], str]] = {
    Algorithm.md5:    md5_hex,
    Algorithm.sha1:   sha1_hex,
    Algorithm.sha256: sha256_hex,
    Algorithm.sha512: sha512_hex,
}


def hex_digest(text: Optional[str], algorithm: Union[Algorithm, str]) -> str:
    """Dispatch to the digest function for algorithm (an Algorithm or its name).

    Raises ValueError for a name outside the supported set.
    """
    return DIGESTS[Algorithm(algorithm)](text)


def _convert_hash_digest(text: Optional[str], algorithm: Algorithm) -> str:
    """Hash the UTF-8 bytes of text and return the hex digest.

    Every failure is re-raised as DigestError; the original exception is chained.
    """
    if text is None:
        raise DigestError(DigestCause.null_input)
    try:
        h = hashlib.new(algorithm.value)
    except ValueError as e:
        raise DigestError(DigestCause.unsupported_algorithm) from e
    except Exception as e:
        raise DigestError(DigestCause.unexpected) from e
    try:
        # UTF-8 regardless of platform default encoding
        h.update(text.encode("utf-8"))
        return h.hexdigest()
    except UnicodeError as e:
        raise DigestError(DigestCause.unsupported_encoding) from e
    except Exception as e:
        raise DigestError(DigestCause.unexpected) from e
