"""
Errors raised while reading a DL4J word2vec model archive.
Underlying archive and I/O failures are not wrapped; they propagate as raised.
"""

from typing import Optional


class Word2VecModelError(ValueError):
    """Base class for word2vec model loading errors."""
    pass


class MissingModelFileError(Word2VecModelError):
    """The archive does not contain the mandatory term/vector entry."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            f"Cannot read Dl4j word2vec model - '{prefix}' file is missing in the zip. "
            f"'{prefix}' is a mandatory file containing the mapping between terms and "
            f"vectors generated by the DL4j library."
        )


class ModelFormatError(Word2VecModelError):
    """The model text is structurally invalid."""
    pass


class MalformedHeaderError(ModelFormatError):
    """The header line is missing or is not '<dictionarySize> <vectorDimension>'."""

    def __init__(self, line: Optional[str], reason: str):
        self.line = line
        self.reason = reason
        if line is None:
            super().__init__(f"Word2Vec model file corrupted. Missing header line: {reason}")
        else:
            super().__init__(f"Word2Vec model file corrupted. Invalid header {line!r}: {reason}")


class MalformedTermError(ModelFormatError):
    """A term token could not be decoded with the file's term encoding."""

    def __init__(self, token: str, line_number: int, reason: str):
        self.token = token
        self.line_number = line_number
        super().__init__(
            f"Word2Vec model file corrupted. Cannot decode term {token!r} "
            f"at line {line_number}: {reason}"
        )


class MalformedVectorError(ModelFormatError):
    """A vector component is not a valid float literal."""

    def __init__(self, token: str, term: str, line_number: int):
        self.token = token
        self.term = term
        self.line_number = line_number
        super().__init__(
            f"Word2Vec model file corrupted. Invalid vector component {token!r} "
            f"for word {term} at line {line_number}"
        )


class DimensionMismatchError(ModelFormatError):
    """A record's vector length differs from the header-declared dimension."""

    def __init__(self, declared: int, actual: int, raw_term: str, term_text: str, line_number: int):
        self.declared = declared
        self.actual = actual
        self.raw_term = raw_term
        self.term_text = term_text
        self.line_number = line_number
        super().__init__(
            f"Word2Vec model file corrupted. Declared vectors of size {declared} "
            f"but found vector of size {actual} for word {raw_term} ({term_text}) "
            f"at line {line_number}"
        )
