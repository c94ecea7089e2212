"""
Term encodings used by DL4J word2vec text exports.

DL4J writes terms either as plain UTF-8 tokens or, when a vocabulary contains
characters that would break the space-delimited format, as Base64 payloads
behind a "b64:" marker. The choice is not declared anywhere in the file; it is
detected once from the first record and applies to the whole file.
"""

import base64
import binascii
from enum import Enum

from wordvec.core.config import B64_MARKER, B64_PREFIX_LENGTH


class TermEncoding(Enum):
    """File-wide term token encoding."""

    PLAIN = "plain"
    BASE64 = "b64"


def detect_term_encoding(first_token: str) -> TermEncoding:
    """Detect the encoding from the first record's term token.

    Tokens shorter than the marker are treated as plain terms.
    """
    if first_token[:len(B64_MARKER)].lower() == B64_MARKER:
        return TermEncoding.BASE64
    return TermEncoding.PLAIN


def decode_term(token: str, encoding: TermEncoding) -> bytes:
    """Decode a term token to raw bytes.

    Raises:
        ValueError: if a Base64 token is too short or its payload is not valid Base64
    """
    if encoding is TermEncoding.PLAIN:
        return token.encode("utf-8")

    if len(token) < B64_PREFIX_LENGTH:
        raise ValueError(f"token shorter than the {B64_PREFIX_LENGTH}-character '{B64_MARKER}' prefix")

    payload = token[B64_PREFIX_LENGTH:]
    # Trailing padding is optional in DL4J output
    payload += "=" * (-len(payload) % 4)
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid Base64 payload: {e}") from e


def term_to_text(term: bytes) -> str:
    """Best-effort text form of a term for diagnostics."""
    return term.decode("utf-8", errors="replace")
