"""Unit tests for WrapWriter and write_all.

WHY: The wrap column is the one piece of state that spans encode chunks.
An off-by-one here shows up as a short or long line only when a chunk
boundary happens to fall on a line boundary.
"""

import io

import pytest

from basenc.core.errors import SinkWriteError
from basenc.stream.drivers import encode_stream
from basenc.stream.wrapper import WrapWriter, write_all


def _wrap(pieces, width):
    sink = io.BytesIO()
    writer = WrapWriter(sink, width)
    for piece in pieces:
        writer.write(piece)
    writer.finish()
    return sink.getvalue(), writer


class TestWrapWriter:

    def test_folds_at_column(self):
        sink = io.BytesIO()
        writer = WrapWriter(sink, 4)
        writer.write(b"ABCDEFGHIJ")
        assert sink.getvalue() == b"ABCD\nEFGH\nIJ"
        assert writer.column == 2
        writer.finish()
        assert sink.getvalue() == b"ABCD\nEFGH\nIJ\n"

    def test_exact_multiple_has_single_trailing_newline(self):
        output, writer = _wrap([b"ABCDEFGH"], 4)
        assert output == b"ABCD\nEFGH\n"
        assert writer.column == 0

    def test_lines_span_writes(self):
        output, _ = _wrap([b"AB", b"CDE", b"F", b"GHIJK"], 4)
        assert output == b"ABCD\nEFGH\nIJK\n"

    def test_zero_disables_wrapping(self):
        output, writer = _wrap([b"ABCDEFGH", b"IJ"], 0)
        assert output == b"ABCDEFGHIJ"
        assert writer.wrap_column == 0

    def test_nothing_written(self):
        output, writer = _wrap([], 4)
        assert output == b""
        output, _ = _wrap([b""], 4)
        assert output == b""
        assert writer.bytes_written == 0

    def test_width_one(self):
        output, _ = _wrap([b"ABC"], 1)
        assert output == b"A\nB\nC\n"

    def test_bytes_written_counts_newlines(self):
        _, writer = _wrap([b"ABCDEFGHIJ"], 4)
        assert writer.bytes_written == 13

    def test_negative_column(self):
        with pytest.raises(ValueError):
            WrapWriter(io.BytesIO(), -1)

    def test_sink_failure(self, failing_sink):
        writer = WrapWriter(failing_sink(limit=0), 4)
        with pytest.raises(SinkWriteError) as excinfo:
            writer.write(b"ABCDEF")
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_finish_failure(self, failing_sink):
        sink = failing_sink(limit=1)
        writer = WrapWriter(sink, 4)
        writer.write(b"AB")
        with pytest.raises(SinkWriteError):
            writer.finish()
        assert bytes(sink.received) == b"AB"


class TestLineInvariant:

    @pytest.mark.parametrize("chunk_size", [60, 120, 30720])
    def test_every_line_is_full_but_the_last(self, sample_payload, chunk_size):
        sink = io.BytesIO()
        encode_stream(io.BytesIO(sample_payload), sink, "base64", wrap_column=76,
                      chunk_size=chunk_size)
        output = sink.getvalue()
        assert output.endswith(b"\n")
        lines = output.split(b"\n")[:-1]
        assert all(len(line) == 76 for line in lines[:-1])
        assert 1 <= len(lines[-1]) <= 76


class _ShortWriteSink(io.RawIOBase):
    """Accepts at most two bytes per write call."""

    def __init__(self):
        self.received = bytearray()

    def writable(self):
        return True

    def write(self, data):
        taken = bytes(data[:2])
        self.received += taken
        return len(taken)


class _StuckSink(io.RawIOBase):

    def writable(self):
        return True

    def write(self, data):
        return 0


class _WouldBlockSink(io.RawIOBase):

    def writable(self):
        return True

    def write(self, data):
        return None


class _SilentBufferedSink(io.BufferedIOBase):
    """Buffered sink whose write() returns None after taking everything."""

    def __init__(self):
        self.received = bytearray()

    def writable(self):
        return True

    def write(self, data):
        self.received += bytes(data)
        return None


class TestWriteAll:

    def test_retries_short_writes(self):
        sink = _ShortWriteSink()
        assert write_all(sink, b"abcdefg") == 7
        assert bytes(sink.received) == b"abcdefg"

    def test_zero_progress_is_an_error(self):
        with pytest.raises(SinkWriteError):
            write_all(_StuckSink(), b"abc")

    def test_empty_data(self):
        assert write_all(_StuckSink(), b"") == 0

    def test_raw_sink_that_would_block(self):
        with pytest.raises(SinkWriteError):
            write_all(_WouldBlockSink(), b"abc")

    def test_buffered_sink_returning_none(self):
        sink = _SilentBufferedSink()
        assert write_all(sink, b"abc") == 3
        assert bytes(sink.received) == b"abc"
