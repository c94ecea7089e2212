"""
Word2vec model loading configuration.
All tunables are read from the environment; file-format constants are fixed.
"""

import logging
import os
from pathlib import Path

# DL4J archive layout (fixed by the exporting library, not configurable)
MODEL_FILE_NAME_PREFIX = "syn0"
B64_MARKER = "b64"
B64_PREFIX_LENGTH = len(B64_MARKER) + 1  # marker plus one delimiter, e.g. "b64:"

# Default model location for scripts
MODEL_PATH = os.getenv("WORDVEC_MODEL_PATH", "./data/word2vec.zip")

LOG_LEVEL = os.getenv("WORDVEC_LOG_LEVEL", "INFO").upper()

# Unit-length vectors for cosine similarity (default disabled, raw values load as written)
NORMALIZE_VECTORS = os.getenv("WORDVEC_NORMALIZE_VECTORS", "false").lower() == "true"

# Upper bounds on header-driven pre-allocation (rows, and float32 values overall).
# Kept as raw strings so a bad value is reported by validate_config()
MAX_PREALLOCATED_TERMS = os.getenv("WORDVEC_MAX_PREALLOCATED_TERMS", "100000")
MAX_PREALLOCATED_VALUES = os.getenv("WORDVEC_MAX_PREALLOCATED_VALUES", "25000000")

# Version string
VERSION = "1.0.0"


def get_model_path() -> Path:
    """Get the configured model archive path."""
    return Path(os.getenv("WORDVEC_MODEL_PATH", MODEL_PATH))


def get_log_level() -> int:
    """Get the configured log level as a logging constant (INFO if unknown)."""
    level_name = os.getenv("WORDVEC_LOG_LEVEL", LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def normalize_vectors_enabled() -> bool:
    """Check if loaded vectors should be L2-normalized."""
    return os.getenv("WORDVEC_NORMALIZE_VECTORS", "false").lower() == "true"


def get_max_preallocated_terms() -> int:
    """Get the cap on rows allocated up front for the term/vector backing store."""
    return int(os.getenv("WORDVEC_MAX_PREALLOCATED_TERMS", MAX_PREALLOCATED_TERMS))


def get_max_preallocated_values() -> int:
    """Get the cap on float32 values (rows x dimension) allocated up front."""
    return int(os.getenv("WORDVEC_MAX_PREALLOCATED_VALUES", MAX_PREALLOCATED_VALUES))


def validate_config():
    """Validate loading configuration and return any issues."""
    issues = []

    level_name = os.getenv("WORDVEC_LOG_LEVEL", LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        issues.append(f"WORDVEC_LOG_LEVEL '{level_name}' is not a valid log level")

    for name, default in [("WORDVEC_MAX_PREALLOCATED_TERMS", MAX_PREALLOCATED_TERMS),
                          ("WORDVEC_MAX_PREALLOCATED_VALUES", MAX_PREALLOCATED_VALUES)]:
        raw_cap = os.getenv(name, default)
        try:
            if int(raw_cap) < 0:
                issues.append(f"{name} must be >= 0")
        except ValueError:
            issues.append(f"{name} '{raw_cap}' is not an integer")

    normalize = os.getenv("WORDVEC_NORMALIZE_VECTORS", "false").lower()
    if normalize not in ["true", "false"]:
        issues.append("WORDVEC_NORMALIZE_VECTORS must be 'true' or 'false'")

    return issues
