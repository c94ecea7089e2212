"""
DL4J word2vec model loading: archive reader, term encodings and the term/vector dictionary.
"""

from .types import TermAndVector
from .encoding import TermEncoding, detect_term_encoding, decode_term
from .model import Word2VecModel
from .errors import (
    Word2VecModelError,
    MissingModelFileError,
    ModelFormatError,
    MalformedHeaderError,
    MalformedTermError,
    MalformedVectorError,
    DimensionMismatchError,
)
from .dl4j_reader import Dl4jModelReader, load_word2vec_model

__all__ = [
    'TermAndVector',
    'TermEncoding',
    'detect_term_encoding',
    'decode_term',
    'Word2VecModel',
    'Word2VecModelError',
    'MissingModelFileError',
    'ModelFormatError',
    'MalformedHeaderError',
    'MalformedTermError',
    'MalformedVectorError',
    'DimensionMismatchError',
    'Dl4jModelReader',
    'load_word2vec_model'
]
