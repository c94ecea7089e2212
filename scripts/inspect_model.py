#!/usr/bin/env python3
"""
Word2vec model inspection utility.
Loads a DL4J word2vec archive and reports what was read.
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordvec.core.config import get_model_path, validate_config
from wordvec.vector import Dl4jModelReader, Word2VecModelError


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Load a DL4J word2vec model archive and print a summary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s model.zip                 # Summary of model.zip
  %(prog)s model.zip --show 10       # Also print the first 10 terms
  %(prog)s --normalize               # Load WORDVEC_MODEL_PATH with unit-length vectors

Environment variables:
- WORDVEC_MODEL_PATH=... (default model archive)
- WORDVEC_NORMALIZE_VECTORS=false (default false)
- WORDVEC_LOG_LEVEL=INFO
        """
    )

    parser.add_argument(
        "model_path",
        nargs="?",
        help="Path to the model zip (default: WORDVEC_MODEL_PATH)"
    )

    parser.add_argument(
        "--show", "-s",
        type=int,
        default=0,
        metavar="N",
        help="Print the first N terms with their vector norms"
    )

    parser.add_argument(
        "--normalize", "-n",
        action="store_true",
        help="L2-normalize vectors while loading"
    )

    args = parser.parse_args(argv)

    if args.show < 0:
        parser.error("--show must be >= 0")

    issues = validate_config()
    if issues:
        for issue in issues:
            print(f"ERROR: {issue}")
        return 1

    model_path = Path(args.model_path) if args.model_path else get_model_path()
    if not model_path.is_file():
        print(f"ERROR: Model file not found: {model_path}")
        return 1

    try:
        with Dl4jModelReader.open(model_path, normalize=args.normalize or None) as reader:
            model = reader.read()

        print(f"Model: {model_path}")
        print(f"Declared terms: {model.dictionary_size:,}")
        print(f"Loaded terms: {model.size:,}")
        print(f"Dimension: {model.dimension}")
        print(f"Term encoding: {reader.term_encoding.value}")
        print(f"Normalized: {reader.normalize}")

        for ord_ in range(min(args.show, model.size)):
            entry = model.entry(ord_)
            norm = float(np.linalg.norm(entry.vector))
            print(f"  {ord_}: {entry.term_text()} (norm {norm:.4f})")

        return 0

    except Word2VecModelError as e:
        print(f"ERROR: Invalid model: {e}")
        return 1
    except Exception as e:
        print(f"ERROR: Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
