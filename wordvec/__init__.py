"""
wordvec - word2vec model loading for synonym expansion.
"""

from wordvec.core.config import VERSION

__version__ = VERSION
