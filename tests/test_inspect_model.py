"""
Tests for the model inspection script.
"""

from scripts.inspect_model import main


def test_summary(model_zip, capsys):
    path = model_zip("3 2\ncat 0.1 0.2\ndog 0.3 0.4\nfish 0.5 0.6\n")

    assert main([str(path)]) == 0

    output = capsys.readouterr().out
    assert "Declared terms: 3" in output
    assert "Loaded terms: 3" in output
    assert "Dimension: 2" in output
    assert "Term encoding: plain" in output
    assert "Normalized: False" in output


def test_show_terms(model_zip, capsys):
    path = model_zip("2 2\nb64:Y2F0 3.0 4.0\nb64:ZG9n 0.0 1.0\n")

    assert main([str(path), "--show", "5"]) == 0

    output = capsys.readouterr().out
    assert "Term encoding: b64" in output
    assert "  0: cat (norm 5.0000)" in output
    assert "  1: dog (norm 1.0000)" in output


def test_normalize_flag(model_zip, capsys):
    path = model_zip("1 2\ncat 3.0 4.0\n")

    assert main([str(path), "--normalize", "--show", "1"]) == 0

    output = capsys.readouterr().out
    assert "Normalized: True" in output
    assert "  0: cat (norm 1.0000)" in output


def test_model_path_from_environment(model_zip, capsys, monkeypatch):
    path = model_zip("1 1\ncat 1.0\n")
    monkeypatch.setenv("WORDVEC_MODEL_PATH", str(path))

    assert main([]) == 0
    assert f"Model: {path}" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.zip")]) == 1
    assert "ERROR: Model file not found" in capsys.readouterr().out


def test_invalid_model(model_zip, capsys):
    path = model_zip("2 2\ncat 1.0 2.0 3.0\n")

    assert main([str(path)]) == 1
    assert "ERROR: Invalid model: Word2Vec model file corrupted" in capsys.readouterr().out


def test_invalid_configuration(model_zip, capsys, monkeypatch):
    path = model_zip("1 1\ncat 1.0\n")
    monkeypatch.setenv("WORDVEC_NORMALIZE_VECTORS", "maybe")

    assert main([str(path)]) == 1
    assert "ERROR: WORDVEC_NORMALIZE_VECTORS" in capsys.readouterr().out


def test_invalid_preallocation_cap(model_zip, capsys, monkeypatch):
    path = model_zip("1 1\ncat 1.0\n")
    monkeypatch.setenv("WORDVEC_MAX_PREALLOCATED_TERMS", "lots")

    assert main([str(path)]) == 1
    assert "ERROR: WORDVEC_MAX_PREALLOCATED_TERMS 'lots' is not an integer" in capsys.readouterr().out
