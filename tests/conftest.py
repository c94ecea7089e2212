"""
Shared fixtures for building DL4J-style word2vec archives.
"""

import zipfile

import pytest


def write_model_zip(path, syn0_text, entry_name="syn0.txt", extra_entries=None):
    """Write a zip holding the model text plus optional decoy entries (written first)."""
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in (extra_entries or {}).items():
            archive.writestr(name, content)
        if syn0_text is not None:
            archive.writestr(entry_name, syn0_text)
    return path


@pytest.fixture
def model_zip(tmp_path):
    """Factory writing a model archive under tmp_path and returning its path."""
    counter = {"n": 0}

    def _make(syn0_text, entry_name="syn0.txt", extra_entries=None):
        counter["n"] += 1
        path = tmp_path / f"model_{counter['n']}.zip"
        return write_model_zip(path, syn0_text, entry_name, extra_entries)

    return _make


@pytest.fixture(autouse=True)
def clean_wordvec_env(monkeypatch):
    """Keep loading behaviour independent of the developer's environment."""
    for name in ["WORDVEC_NORMALIZE_VECTORS", "WORDVEC_MAX_PREALLOCATED_TERMS", "WORDVEC_MAX_PREALLOCATED_VALUES", "WORDVEC_LOG_LEVEL", "WORDVEC_MODEL_PATH"]:
        monkeypatch.delenv(name, raising=False)
