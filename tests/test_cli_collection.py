import hashlib

from fsdrkit.sigmf.cli_collection import create_collection, main
from fsdrkit.sigmf.description import Description


def _recording(tmp_path, stem, payload):
    (tmp_path / f"{stem}.sigmf-data").write_bytes(payload)
    return tmp_path / stem


def test_create_collection_lists_streams_with_hashes(tmp_path):
    first = _recording(tmp_path, "first", b"\x01\x02\x03")
    second = _recording(tmp_path, "second", b"hello")
    output = tmp_path / "index.sigmf-meta"

    create_collection([first, second], output)

    desc = Description.open(output)
    assert desc.global_ is None
    streams = desc.collection.streams
    assert len(streams) == 2
    assert streams[0].hash == hashlib.sha512(b"\x01\x02\x03").hexdigest()
    assert streams[1].hash == hashlib.sha512(b"hello").hexdigest()
    assert streams[0].name == tmp_path / "first.sigmf-data"
    assert desc.collection.version == "1.0.0"


def test_create_collection_reports_each_file(tmp_path, capsys):
    first = _recording(tmp_path, "first", b"abc")
    create_collection([first], tmp_path / "out.sigmf-meta")
    assert "Adding" in capsys.readouterr().out


def test_main_success(tmp_path):
    rec = _recording(tmp_path, "rec", b"data")
    output = tmp_path / "col.sigmf-meta"
    assert main(["create", "-o", str(output), str(rec)]) == 0
    assert len(Description.open(output).collection.streams) == 1


def test_main_missing_data_file(tmp_path, capsys):
    output = tmp_path / "col.sigmf-meta"
    assert main(["create", "-o", str(output), str(tmp_path / "absent")]) == 1
    assert capsys.readouterr().err != ""
    assert not output.exists()