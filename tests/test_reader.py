import io

from mtailf.core.reader import read_chunk


def test_reads_up_to_and_including_delimiter() -> None:
    handle = io.BytesIO(b"first\nsecond\n")

    assert read_chunk(handle, 0, b"\n") == b"first\n"
    assert read_chunk(handle, 6, b"\n") == b"second\n"


def test_reads_to_end_of_file_without_delimiter() -> None:
    handle = io.BytesIO(b"abc\x00\x00\x00")

    assert read_chunk(handle, 0, b"\n") == b"abc\x00\x00\x00"


def test_no_data_past_end() -> None:
    handle = io.BytesIO(b"abc\n")

    assert read_chunk(handle, 4, b"\n") == b""
    assert read_chunk(handle, 100, b"\n") == b""


def test_delimiter_beyond_first_block() -> None:
    data = b"x" * 10 + b"\n" + b"tail"
    handle = io.BytesIO(data)

    assert read_chunk(handle, 0, b"\n", block_size=3) == b"x" * 10 + b"\n"
    assert read_chunk(handle, 11, b"\n", block_size=3) == b"tail"


def test_sentinel_as_delimiter_stops_at_padding() -> None:
    handle = io.BytesIO(b"new text\n\x00\x00\x00")

    assert read_chunk(handle, 0, b"\x00") == b"new text\n\x00"
