import pytest

from check_vectors import DEFAULT_VECTORS, check_vectors, load_vectors, main


def test_shipped_vectors_pass(capsys):
    vectors = load_vectors(DEFAULT_VECTORS)
    passed, failed = check_vectors(vectors)

    assert failed == 0
    assert passed > 0
    assert "[FAIL]" not in capsys.readouterr().out


def test_algorithm_filter(capsys):
    vectors = load_vectors(DEFAULT_VECTORS)
    check_vectors(vectors, ["sha1"])

    out = capsys.readouterr().out
    assert "sha1" in out
    assert "sha256" not in out


def test_main_default_file(capsys):
    assert main([]) == 0
    assert "[SUMMARY]" in capsys.readouterr().out


def test_main_reports_mismatch(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text(
        "vectors:\n"
        "  - input: abc\n"
        "    sha256: \"0000000000000000000000000000000000000000000000000000000000000000\"\n"
    )

    assert main(["--vectors", str(path)]) == 1
    out = capsys.readouterr().out
    assert "[FAIL]" in out
    assert "0 passed, 1 failed" in out


@pytest.mark.parametrize(
    "content",
    [
        "- input: abc\n",
        "vectors:\n  - sha1: abc\n",
        "vectors: nope\n",
    ],
)
def test_malformed_file(tmp_path, content):
    path = tmp_path / "vectors.yaml"
    path.write_text(content)

    with pytest.raises(ValueError):
        load_vectors(path)


def test_main_malformed_file(tmp_path, capsys):
    path = tmp_path / "vectors.yaml"
    path.write_text("vectors: 3\n")

    assert main(["--vectors", str(path)]) == 1
    assert "Error loading vectors" in capsys.readouterr().err


def test_bad_hex_input_is_rejected_on_load(tmp_path):
    path = tmp_path / "vectors.yaml"
    path.write_text("vectors:\n  - input: \"0xzz\"\n    sha1: \"00\"\n")

    with pytest.raises(ValueError, match="vector 0"):
        load_vectors(path)


def test_main_bad_hex_input(tmp_path, capsys):
    path = tmp_path / "vectors.yaml"
    path.write_text("vectors:\n  - input: \"0xzz\"\n    sha256: \"00\"\n")

    assert main(["--vectors", str(path)]) == 1
    err = capsys.readouterr().err
    assert "Error loading vectors" in err
    assert "Invalid hex digit" in err


def test_main_missing_file(tmp_path):
    assert main(["--vectors", str(tmp_path / "missing.yaml")]) == 1
