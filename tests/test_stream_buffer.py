import gzip
import io

import pytest

from sattools.stream_buffer import (
    COMPRESSED_WRITE,
    READ,
    UNCOMPRESSED_WRITE,
    StreamBuffer,
)

TEST_CNF = "p cnf 4 4\n1 -2 3 0\n-1 2 0\n2 -3 4 0\n-4 1 0\n"


@pytest.fixture
def cnf_path(tmp_path):
    path = tmp_path / "test.cnf"
    path.write_text(TEST_CNF)
    return path


def test_file_not_exists(tmp_path):
    with pytest.raises(OSError, match="Cannot open file"):
        StreamBuffer(tmp_path / "file_not_exists", READ)


def test_invalid_mode(cnf_path):
    with pytest.raises(ValueError):
        StreamBuffer(cnf_path, "x")


def test_current(cnf_path):
    with StreamBuffer(cnf_path, READ) as stream:
        assert stream.current() == "p"


def test_advance(cnf_path):
    with StreamBuffer(cnf_path, READ) as stream:
        for expected in "p cnf 4 4\n":
            assert stream.current() == expected
            stream.advance()


def test_skip_whitespaces(cnf_path):
    with StreamBuffer(cnf_path, READ) as stream:
        stream.skip_whitespaces()
        assert stream.current() == "p"
        stream.advance()
        stream.skip_whitespaces()
        assert stream.current() == "c"


def test_skip_line(cnf_path):
    with StreamBuffer(cnf_path, READ) as stream:
        assert stream.current() == "p"
        stream.skip_line()
        assert stream.current() == "1"
        for _ in range(4):
            stream.skip_line()
        assert stream.current() == "\0"


def test_read_int(cnf_path):
    with StreamBuffer(cnf_path, READ) as stream:
        stream.skip_line()
        assert stream.read_int() == 1
        assert stream.current() == " "
        stream.advance()
        assert stream.read_int() == -2
        assert stream.current() == " "
        stream.advance()
        assert stream.read_int() == 3
        assert stream.current() == " "
        stream.advance()


def test_read_int_plus_sign_and_terminators(tmp_path):
    path = tmp_path / "ints.txt"
    path.write_text("+12,-7)")
    with StreamBuffer(path, READ) as stream:
        assert stream.read_int() == 12
        assert stream.current() == ","
        stream.advance()
        assert stream.read_int() == -7
        assert stream.current() == ")"


def test_read_int_rejects_garbage(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("12x")
    with StreamBuffer(path, READ) as stream:
        with pytest.raises(ValueError, match="Cannot read literal"):
            stream.read_int()


def test_reads_gzip_file(tmp_path):
    path = tmp_path / "test.cnf.gz"
    with gzip.open(path, "wt") as handle:
        handle.write(TEST_CNF)
    with StreamBuffer(path, READ) as stream:
        assert stream.current() == "p"
        stream.skip_line()
        assert stream.read_int() == 1


def test_compressed_write_round_trip(tmp_path):
    path = tmp_path / "out.cnf.gz"
    with StreamBuffer(path, COMPRESSED_WRITE) as stream:
        stream.write("p cnf ")
        stream.write_int(3)
        stream.write(" ")
        stream.write_int(-2)
        stream.write("\n")
        stream.flush()
    assert path.read_bytes()[:2] == b"\x1f\x8b"
    assert gzip.decompress(path.read_bytes()).decode() == "p cnf 3 -2\n"
    with StreamBuffer(path, READ) as stream:
        assert stream.current() == "p"
        stream.advance()
        stream.advance()
        stream.advance()
        stream.advance()
        stream.advance()
        assert stream.read_int() == 3
        assert stream.read_int() == -2


def test_uncompressed_write(tmp_path):
    path = tmp_path / "out.cnf"
    with StreamBuffer(path, UNCOMPRESSED_WRITE) as stream:
        stream.write("1 -2 ")
        stream.write_int(0)
    assert path.read_text() == "1 -2 0"


def test_write_on_read_stream_fails(cnf_path):
    with StreamBuffer(cnf_path, READ) as stream:
        with pytest.raises(io.UnsupportedOperation):
            stream.write("x")


def test_read_on_write_stream_fails(tmp_path):
    with StreamBuffer(tmp_path / "w.cnf", UNCOMPRESSED_WRITE) as stream:
        with pytest.raises(io.UnsupportedOperation):
            stream.current()