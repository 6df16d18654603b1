import yaml

from shasum_cli import sha1sum, sha224sum, sha256sum
from trace_states import build_trace, main, trace_filename, write_trace


def test_trace_single_block():
    trace = build_trace("abc")

    assert trace["algorithm"] == "sha256"
    assert trace["message_hex"] == "616263"
    assert trace["digest_hex"] == sha256sum("abc")
    assert len(trace["blocks"]) == 1

    block = trace["blocks"][0]
    assert block["words"][0] == "61626380"
    assert block["words"][15] == "00000018"
    assert len(block["rounds"]) == 64
    assert "".join(block["hash_state"]) == trace["digest_hex"]


def test_trace_sha1_two_blocks():
    text = "a" * 60
    trace = build_trace(text, "sha1")

    assert trace["digest_hex"] == sha1sum(text)
    assert len(trace["blocks"]) == 2
    assert all(len(b["rounds"]) == 80 for b in trace["blocks"])
    assert all(len(r) == 5 for r in trace["blocks"][1]["rounds"])


def test_trace_sha224_keeps_full_state():
    trace = build_trace("abc", "sha224")

    assert trace["digest_hex"] == sha224sum("abc")
    assert len(trace["blocks"][0]["hash_state"]) == 8
    assert "".join(trace["blocks"][0]["hash_state"][:7]) == trace["digest_hex"]


def test_trace_hex_literal_input():
    trace = build_trace("0x195a", "sha1")

    assert trace["input"] == "0x195a"
    assert trace["message_hex"] == "195a"


def test_write_trace_round_trips(tmp_path):
    trace = build_trace("0x195a", "sha1")
    output_path = write_trace(trace, str(tmp_path / "out"))

    assert output_path.endswith(trace_filename("0x195a", "sha1"))
    with open(output_path) as f:
        assert yaml.safe_load(f) == trace


def test_main(tmp_path, capsys):
    assert main(["-a", "sha224", "hello", "--output-dir", str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert sha224sum("hello") in out
    assert "Done!" in out
    assert len(list(tmp_path.glob("sha224-*.yaml"))) == 1


def test_main_invalid_input(tmp_path, capsys):
    assert main(["0xqq", "--output-dir", str(tmp_path)]) == 1
    assert "Invalid hex digit" in capsys.readouterr().err
