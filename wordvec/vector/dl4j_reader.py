"""
Reader for word2vec models exported by Deeplearning4j (DL4J).

DL4J writes a zip archive; the entry whose name starts with "syn0" holds the
vectors as UTF-8 text:

    <dictionarySize> <vectorDimension>
    <term> <f0> <f1> ... <f(d-1)>
    ...

Terms are either plain tokens or "b64:"-prefixed Base64 payloads, detected
from the first record. Every other archive entry is ignored.

Usage:
    with Dl4jModelReader.open("model.zip") as reader:
        model = reader.read()
"""

import io
import zipfile
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union

import numpy as np

from wordvec.core.config import MODEL_FILE_NAME_PREFIX, normalize_vectors_enabled
from wordvec.util.logging import logger
from .encoding import TermEncoding, decode_term, detect_term_encoding, term_to_text
from .errors import (
    DimensionMismatchError,
    MalformedHeaderError,
    MalformedTermError,
    MalformedVectorError,
    MissingModelFileError,
)
from .model import Word2VecModel
from .types import TermAndVector


def parse_header(line: Optional[str]) -> Tuple[int, int]:
    """Parse '<dictionarySize> <vectorDimension>' into two non-negative ints.

    Tokens after the second are ignored.
    """
    if line is None:
        raise MalformedHeaderError(None, "model entry is empty")

    tokens = split_record(line)
    if len(tokens) < 2:
        raise MalformedHeaderError(line, "expected '<dictionarySize> <vectorDimension>'")

    values = []
    for name, token in zip(("dictionary size", "vector dimension"), tokens[:2]):
        if not (token.isascii() and token.isdigit()):
            raise MalformedHeaderError(line, f"{name} {token!r} is not a non-negative integer")
        values.append(int(token))

    return values[0], values[1]


def split_record(line: str) -> List[str]:
    """Split a line on single spaces, dropping the line break and trailing delimiters.

    Consecutive spaces produce empty tokens. A blank line yields no tokens.
    """
    line = line.rstrip("\r\n").rstrip(" ")
    if not line:
        return []
    return line.split(" ")


def parse_vector(tokens: List[str], raw_term: str, line_number: int) -> np.ndarray:
    """Parse vector components as float32, in order.

    Literals are parsed to float64 then rounded to float32. Literals with more
    digits than float32 can hold may round differently from a direct float32
    parse; the shortest-repr literals DL4J writes are unaffected.
    """
    values = []
    for token in tokens:
        # float() also accepts digit separators and non-ASCII digits
        if "_" in token or not token.isascii():
            raise MalformedVectorError(token, raw_term, line_number)
        try:
            values.append(float(token))
        except ValueError:
            raise MalformedVectorError(token, raw_term, line_number) from None
    return np.array(values, dtype=np.float32)


def decode_record(tokens: List[str], vector_dimension: int, encoding: TermEncoding, line_number: int) -> TermAndVector:
    """Decode one record's tokens into a TermAndVector.

    Raises:
        MalformedTermError: term token invalid for the file's encoding
        MalformedVectorError: a component is not a float literal
        DimensionMismatchError: vector length differs from the declared dimension
    """
    raw_term = tokens[0]
    try:
        term = decode_term(raw_term, encoding)
    except ValueError as e:
        raise MalformedTermError(raw_term, line_number, str(e)) from e

    vector = parse_vector(tokens[1:], raw_term, line_number)

    if vector.shape[0] != vector_dimension:
        raise DimensionMismatchError(
            declared=vector_dimension,
            actual=int(vector.shape[0]),
            raw_term=raw_term,
            term_text=term_to_text(term),
            line_number=line_number,
        )

    return TermAndVector(term=term, vector=vector)


class Dl4jModelReader:
    """Reads a DL4J word2vec zip archive into a frozen Word2VecModel.

    The reader owns the stream it is given and closes it when read() returns
    or raises, or when used as a context manager.
    """

    def __init__(self, stream: BinaryIO, normalize: Optional[bool] = None, source: Optional[str] = None):
        """
        Initialize the reader.

        Args:
            stream: Binary stream positioned at the start of the zip archive
            normalize: L2-normalize vectors (default: WORDVEC_NORMALIZE_VECTORS)
            source: Name used in log messages (default: the stream's name)
        """
        self._stream = stream
        self._archive: Optional[zipfile.ZipFile] = None
        self._closed = False
        self.normalize = normalize_vectors_enabled() if normalize is None else normalize
        self.source = source or str(getattr(stream, "name", "<stream>"))
        self.term_encoding: Optional[TermEncoding] = None

    @classmethod
    def open(cls, path: Union[str, Path], normalize: Optional[bool] = None) -> "Dl4jModelReader":
        """Open a model archive from the filesystem."""
        return cls(open(path, "rb"), normalize=normalize, source=str(path))

    def __enter__(self) -> "Dl4jModelReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the archive and the underlying stream."""
        if self._closed:
            return
        self._closed = True
        try:
            if self._archive is not None:
                self._archive.close()
        finally:
            self._stream.close()

    def read(self) -> Word2VecModel:
        """Read the model; the reader is closed afterwards whatever the outcome."""
        if self._closed:
            raise ValueError("Dl4jModelReader is closed")

        try:
            model = self._read()
        except Exception as e:
            logger.log_model_failure(self.source, e)
            raise
        finally:
            self.close()

        if model.size != model.dictionary_size:
            logger.warning(
                f"Model {self.source} declares {model.dictionary_size} terms but contains {model.size}"
            )
        logger.log_model_operation("load", self.source, {
            "terms": model.size,
            "dimension": model.dimension,
            "encoding": self.term_encoding.value,
            "normalized": self.normalize
        })
        return model

    def _read(self) -> Word2VecModel:
        self._archive = zipfile.ZipFile(self._seekable_stream())

        entry = self._locate_model_entry()
        with self._archive.open(entry) as raw, io.TextIOWrapper(raw, encoding="utf-8") as lines:
            model = self._read_records(lines)

        if self.normalize:
            return model.l2_normalized()
        return model

    def _seekable_stream(self) -> BinaryIO:
        # zipfile needs random access to the central directory
        seekable = getattr(self._stream, "seekable", None)
        if seekable is not None and seekable():
            return self._stream
        return io.BytesIO(self._stream.read())

    def _iter_entries(self) -> Iterator[zipfile.ZipInfo]:
        for info in self._archive.infolist():
            if not info.is_dir():
                yield info

    def _locate_model_entry(self) -> zipfile.ZipInfo:
        skipped = 0
        for info in self._iter_entries():
            if info.filename.startswith(MODEL_FILE_NAME_PREFIX):
                logger.log_model_operation("entry_located", self.source, {
                    "entry": info.filename,
                    "skipped_entries": skipped
                })
                return info
            skipped += 1
        raise MissingModelFileError(MODEL_FILE_NAME_PREFIX)

    def _read_records(self, lines: io.TextIOWrapper) -> Word2VecModel:
        header = lines.readline()
        dictionary_size, vector_dimension = parse_header(header if header else None)
        logger.debug(
            f"Model {self.source} header: dictionary_size={dictionary_size}, vector_dimension={vector_dimension}"
        )

        model = Word2VecModel(dictionary_size, vector_dimension)
        encoding = None

        for line_number, line in enumerate(lines, start=2):
            tokens = split_record(line)
            if not tokens:
                continue

            if encoding is None:
                encoding = detect_term_encoding(tokens[0])
                logger.debug(f"Model {self.source} term encoding: {encoding.value}")

            model.add_term_and_vector(decode_record(tokens, vector_dimension, encoding, line_number))

        self.term_encoding = encoding or TermEncoding.PLAIN
        return model.freeze()


def load_word2vec_model(source: Union[str, Path, BinaryIO], normalize: Optional[bool] = None) -> Word2VecModel:
    """Load a DL4J word2vec model from a path or an open binary stream.

    A stream passed in is closed once loading finishes or fails.
    """
    if isinstance(source, (str, Path)):
        reader = Dl4jModelReader.open(source, normalize=normalize)
    else:
        reader = Dl4jModelReader(source, normalize=normalize)

    with reader:
        return reader.read()
