import os

import pytest

from pushswap.libft.nextline import LineReader

CONTENT = "one\ntwo\n\nthree"


def _open(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return os.open(path, os.O_RDONLY)


def _read_all(reader, fd):
    lines = []
    while (line := reader.get_next_line(fd)) is not None:
        lines.append(line)
    return lines


@pytest.mark.parametrize("size", [1, 3, 42, 1000])
def test_lines_in_order(tmp_path, size):
    fd = _open(tmp_path, "f.txt", CONTENT)
    try:
        lines = _read_all(LineReader(size), fd)
    finally:
        os.close(fd)
    assert lines == ["one\n", "two\n", "\n", "three"]


@pytest.mark.parametrize("size", [1, 5, 64])
def test_join_round_trip(tmp_path, size):
    text = "alpha\nbeta\ngamma\n"
    fd = _open(tmp_path, "r.txt", text)
    try:
        lines = _read_all(LineReader(size), fd)
    finally:
        os.close(fd)
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines)


def test_empty_file(tmp_path):
    fd = _open(tmp_path, "empty.txt", "")
    try:
        assert LineReader().get_next_line(fd) is None
    finally:
        os.close(fd)


def test_negative_fd():
    assert LineReader().get_next_line(-1) is None


def test_bad_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0)


def test_interleaved_descriptors(tmp_path):
    fd1 = _open(tmp_path, "a.txt", "a1\na2\n")
    fd2 = _open(tmp_path, "b.txt", "b1\nb2\n")
    reader = LineReader(100)
    try:
        got = [
            reader.get_next_line(fd1),
            reader.get_next_line(fd2),
            reader.get_next_line(fd1),
            reader.get_next_line(fd2),
        ]
    finally:
        os.close(fd1)
        os.close(fd2)
    assert got == ["a1\n", "b1\n", "a2\n", "b2\n"]


def test_reset_drops_buffered_data(tmp_path):
    fd = _open(tmp_path, "f.txt", CONTENT)
    reader = LineReader(1000)
    try:
        assert reader.get_next_line(fd) == "one\n"
        reader.reset(fd)
        assert reader.get_next_line(fd) is None
    finally:
        os.close(fd)


def test_closed_descriptor_raises(tmp_path):
    fd = _open(tmp_path, "f.txt", CONTENT)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().get_next_line(fd)