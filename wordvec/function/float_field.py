"""
Per-document float field values backed by numeric doc values.

Values are stored as 32-bit integer bit patterns and reinterpreted as float32
on access. Documents must be visited in non-decreasing doc id order.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from wordvec.util.logging import logger

NO_MORE_DOCS = 2**31 - 1


def int_bits_to_float(bits: int) -> float:
    """Reinterpret the low 32 bits of an integer as an IEEE-754 float32."""
    return float(np.array([bits & 0xFFFFFFFF], dtype=np.uint32).view(np.float32)[0])


def float_to_int_bits(value: float) -> int:
    """Signed 32-bit integer bit pattern of a float32 value."""
    return int(np.array([value], dtype=np.float32).view(np.int32)[0])


class NumericDocValues(ABC):
    """Abstract forward-only cursor over per-document numeric values."""

    @abstractmethod
    def doc_id(self) -> int:
        """Current doc id: -1 before the first advance, NO_MORE_DOCS once exhausted."""
        pass

    @abstractmethod
    def advance(self, target: int) -> int:
        """Move to the first doc >= target that has a value and return its id."""
        pass

    @abstractmethod
    def long_value(self) -> int:
        """Stored value of the current doc."""
        pass


class ArrayNumericDocValues(NumericDocValues):
    """In-memory numeric doc values over sorted doc ids."""

    def __init__(self, docs: Sequence[int], values: Sequence[int]):
        self._docs = np.asarray(docs, dtype=np.int64)
        self._values = np.asarray(values, dtype=np.int64)

        if self._docs.shape != self._values.shape or self._docs.ndim != 1:
            raise ValueError("docs and values must be one-dimensional sequences of equal length")
        if len(self._docs) and (self._docs[0] < 0 or np.any(np.diff(self._docs) <= 0)):
            raise ValueError("doc ids must be non-negative and strictly increasing")

        self._pos = -1
        self._doc = -1

    @classmethod
    def from_floats(cls, docs: Sequence[int], values: Sequence[float]) -> "ArrayNumericDocValues":
        """Build doc values storing the float32 bit pattern of each value."""
        bits = np.asarray(values, dtype=np.float32).view(np.int32)
        return cls(docs, bits)

    def doc_id(self) -> int:
        return self._doc

    def advance(self, target: int) -> int:
        start = self._pos + 1
        pos = start + int(np.searchsorted(self._docs[start:], target, side="left"))
        if pos >= len(self._docs):
            self._pos = len(self._docs)
            self._doc = NO_MORE_DOCS
        else:
            self._pos = pos
            self._doc = int(self._docs[pos])
        return self._doc

    def long_value(self) -> int:
        if self._doc < 0 or self._doc == NO_MORE_DOCS:
            raise RuntimeError("Cursor is not positioned on a document")
        return int(self._values[self._pos])


class FloatDocValues:
    """Float view over numeric doc values for one field.

    exists() must be called with non-decreasing doc ids; the cursor is only
    advanced when a later doc is requested.
    """

    def __init__(self, source: "FloatFieldSource", values: NumericDocValues):
        self.source = source
        self._values = values
        self._last_doc_id = 0

    def exists(self, doc: int) -> bool:
        """Whether doc has a stored value."""
        if doc < self._last_doc_id:
            logger.log_doc_values_operation("exists", self.source.field, {
                "last_doc_id": self._last_doc_id,
                "doc_id": doc
            }, status="failed")
            raise ValueError(
                f"docs were sent out-of-order: lastDocID={self._last_doc_id} vs docID={doc}"
            )
        self._last_doc_id = doc

        cur_doc_id = self._values.doc_id()
        if doc > cur_doc_id:
            cur_doc_id = self._values.advance(doc)
        return doc == cur_doc_id

    def float_val(self, doc: int) -> float:
        """Stored value as float32, 0.0 when doc has no value."""
        if self.exists(doc):
            return int_bits_to_float(self._values.long_value())
        return 0.0

    def double_val(self, doc: int) -> float:
        return self.float_val(doc)

    def int_val(self, doc: int) -> int:
        return int(self.float_val(doc))

    def object_val(self, doc: int) -> Optional[float]:
        """Stored value, or None when doc has no value."""
        return self.float_val(doc) if self.exists(doc) else None

    def str_val(self, doc: int) -> str:
        return str(self.float_val(doc))

    def to_string(self, doc: int) -> str:
        return f"{self.source.description()}={self.str_val(doc)}"


class FloatFieldSource:
    """Exposes a numeric field's stored values as floats."""

    def __init__(self, field: str):
        self.field = field

    def description(self) -> str:
        return f"float({self.field})"

    def get_values(self, values: NumericDocValues) -> FloatDocValues:
        """Float view over the field's doc values for one segment."""
        return FloatDocValues(self, values)

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return self.field == other.field

    def __hash__(self):
        return hash((float, self.field))

    def __repr__(self) -> str:
        return self.description()
