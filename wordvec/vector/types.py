"""
Term/vector record types for loaded word2vec models.
"""

from dataclasses import dataclass

import numpy as np

from .encoding import term_to_text


@dataclass(frozen=True)
class TermAndVector:
    """One (term, vector) record of a word2vec model."""

    term: bytes
    """Raw term bytes (UTF-8 text or decoded Base64 payload)"""

    vector: np.ndarray
    """Read-only float32 vector"""

    def __post_init__(self):
        vector = np.asarray(self.vector, dtype=np.float32)
        if vector.ndim != 1:
            raise ValueError(f"Vector must be one-dimensional, got shape {vector.shape}")
        if vector.flags.writeable:
            vector = vector.copy()
            vector.flags.writeable = False
        object.__setattr__(self, "vector", vector)

    @property
    def dimension(self) -> int:
        return int(self.vector.shape[0])

    def term_text(self) -> str:
        """Term as text; undecodable bytes are replaced."""
        return term_to_text(self.term)

    def __eq__(self, other):
        if not isinstance(other, TermAndVector):
            return NotImplemented
        return self.term == other.term and np.array_equal(self.vector, other.vector)

    def __hash__(self):
        return hash((self.term, self.vector.tobytes()))
