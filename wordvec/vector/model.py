"""
In-memory term/vector dictionary built from a word2vec model file.

The model is filled record by record while the file is read, then frozen.
Only frozen models are handed to consumers; lookups require a frozen model
and appends are rejected once frozen.
"""

from typing import Dict, Iterator, List, Optional, Union

import numpy as np

from wordvec.core.config import get_max_preallocated_terms, get_max_preallocated_values
from .types import TermAndVector

_MIN_GROWTH = 16


class Word2VecModel:
    """Ordered collection of (term, vector) records sharing one dimension.

    Vectors are kept in a single float32 matrix, pre-sized from the
    header-declared dictionary size (capped by configuration) and grown on
    demand. Duplicate terms are kept as distinct entries.
    """

    def __init__(self, dictionary_size: int, vector_dimension: int, max_preallocated: Optional[int] = None):
        """
        Initialize an empty model.

        Args:
            dictionary_size: Number of terms declared by the model header (capacity hint only)
            vector_dimension: Length every vector must have
            max_preallocated: Cap on rows allocated up front (default: WORDVEC_MAX_PREALLOCATED_TERMS);
                rows are further limited to WORDVEC_MAX_PREALLOCATED_VALUES / vector_dimension
        """
        if dictionary_size < 0:
            raise ValueError(f"Dictionary size must be >= 0, got {dictionary_size}")
        if vector_dimension < 0:
            raise ValueError(f"Vector dimension must be >= 0, got {vector_dimension}")

        if max_preallocated is None:
            max_preallocated = get_max_preallocated_terms()

        self.dictionary_size = dictionary_size
        self.dimension = vector_dimension

        self._terms: List[bytes] = []
        # Rows are bounded by the term cap and by the overall value budget
        value_rows = max(get_max_preallocated_values(), 0) // max(vector_dimension, 1)
        rows = min(dictionary_size, max(max_preallocated, 0), value_rows)
        self._min_growth = max(1, min(_MIN_GROWTH, value_rows))
        self._vectors = np.empty((rows, vector_dimension), dtype=np.float32)
        self._count = 0
        self._term_to_ord: Dict[bytes, int] = {}
        self._frozen = False

    @property
    def size(self) -> int:
        """Number of records actually loaded (may differ from dictionary_size)."""
        return self._count

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def vectors(self) -> np.ndarray:
        """Read-only (size, dimension) float32 matrix of all vectors."""
        self._check_frozen()
        return self._vectors

    def add_term_and_vector(self, entry: TermAndVector) -> None:
        """Append one record."""
        if self._frozen:
            raise RuntimeError("Cannot add terms to a frozen Word2VecModel")
        if entry.dimension != self.dimension:
            raise ValueError(
                f"Vector dimension {entry.dimension} does not match model dimension {self.dimension}"
            )

        if self._count == self._vectors.shape[0]:
            self._grow()

        self._vectors[self._count] = entry.vector
        self._terms.append(entry.term)
        self._count += 1

    def _grow(self) -> None:
        capacity = max(self._min_growth, self._vectors.shape[0] * 2)
        grown = np.empty((capacity, self.dimension), dtype=np.float32)
        grown[:self._count] = self._vectors[:self._count]
        self._vectors = grown

    def freeze(self) -> "Word2VecModel":
        """Trim the backing store, build the term index and reject further appends."""
        if self._frozen:
            return self

        self._vectors = self._vectors[:self._count].copy()
        self._vectors.flags.writeable = False

        # First occurrence wins for lookups; duplicates stay in the collection
        for ord_, term in enumerate(self._terms):
            self._term_to_ord.setdefault(term, ord_)

        self._frozen = True
        return self

    def _check_frozen(self) -> None:
        if not self._frozen:
            raise RuntimeError("Word2VecModel is still being loaded")

    def term_value(self, ord_: int) -> bytes:
        """Term at the given ordinal."""
        self._check_frozen()
        return self._terms[ord_]

    def vector_value(self, ord_: int) -> np.ndarray:
        """Vector at the given ordinal."""
        self._check_frozen()
        if not -self._count <= ord_ < self._count:
            raise IndexError(f"Ordinal {ord_} out of range for model of size {self._count}")
        return self._vectors[ord_]

    def entry(self, ord_: int) -> TermAndVector:
        """Record at the given ordinal."""
        return TermAndVector(term=self.term_value(ord_), vector=self.vector_value(ord_))

    def get_vector_value(self, term: Union[bytes, str]) -> Optional[np.ndarray]:
        """Vector of the first record with this term, or None if absent."""
        self._check_frozen()
        if isinstance(term, str):
            term = term.encode("utf-8")
        ord_ = self._term_to_ord.get(term)
        if ord_ is None:
            return None
        return self._vectors[ord_]

    def __contains__(self, term) -> bool:
        return self.get_vector_value(term) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[TermAndVector]:
        self._check_frozen()
        for ord_ in range(self._count):
            yield self.entry(ord_)

    def l2_normalized(self) -> "Word2VecModel":
        """Return a new frozen model with unit-length vectors (zero vectors unchanged)."""
        self._check_frozen()

        norms = np.linalg.norm(self._vectors, axis=1, keepdims=True)
        safe_norms = np.where(norms > 0, norms, 1.0)

        normalized = Word2VecModel(self.dictionary_size, self.dimension, max_preallocated=0)
        normalized._terms = list(self._terms)
        normalized._vectors = (self._vectors / safe_norms).astype(np.float32)
        normalized._count = self._count
        return normalized.freeze()

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "loading"
        return (
            f"Word2VecModel(dictionary_size={self.dictionary_size}, "
            f"dimension={self.dimension}, size={self._count}, {state})"
        )
