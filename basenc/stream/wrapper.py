"""Encode-side line folding.

WHY: Encoded text is usually wrapped (76 columns by default, as MIME
expects) so it survives line-length limits in mail and terminals.

HOW: WrapWriter owns one counter: symbols written since the last line
break. write() copies symbols through, inserting '\\n' each time the
counter reaches the wrap column. finish() terminates a non-empty last
line.

RULES:
- wrap_column == 0 passes symbols through untouched, no trailing newline
- After every write() the counter is strictly below wrap_column
- Every line but the last has exactly wrap_column symbols; the last 1..wrap_column
- Sink OSErrors surface as SinkWriteError
"""

from __future__ import annotations

import io
from typing import BinaryIO

from basenc.core.errors import SinkWriteError


def write_all(sink: BinaryIO, data: bytes) -> int:
    """Write every byte of ``data`` to ``sink``, retrying short writes.

    Raw (unbuffered) streams may accept fewer bytes than offered. A None
    result means "all written" only for buffered streams; from a raw
    stream it means the write would block and is a failure.
    """
    view = memoryview(data)
    try:
        while view:
            written = sink.write(view)
            if written is None:
                if isinstance(sink, io.BufferedIOBase):
                    break
                raise SinkWriteError()
            if written == 0:
                raise SinkWriteError()
            view = view[written:]
    except OSError as exc:
        raise SinkWriteError() from exc
    return len(data)


class WrapWriter:
    """Line-folding writer for one encode run.

    Attributes:
        bytes_written: Bytes handed to the sink, line breaks included.
    """

    def __init__(self, sink: BinaryIO, wrap_column: int = 0) -> None:
        if wrap_column < 0:
            raise ValueError("wrap column must be non-negative, got {}".format(wrap_column))
        self._sink = sink
        self._wrap_column = wrap_column
        self._column = 0
        self.bytes_written = 0

    @property
    def wrap_column(self) -> int:
        return self._wrap_column

    @property
    def column(self) -> int:
        """Symbols written since the last line break."""
        return self._column

    def write(self, symbols: bytes) -> None:
        if not symbols:
            return
        width = self._wrap_column
        if width == 0:
            self._emit(symbols)
            return

        out = bytearray()
        position = 0
        while position < len(symbols):
            take = min(width - self._column, len(symbols) - position)
            out += symbols[position:position + take]
            position += take
            self._column += take
            if self._column == width:
                out += b"\n"
                self._column = 0
        self._emit(bytes(out))

    def finish(self) -> None:
        """Terminate the last line if wrapping is on and it is non-empty."""
        if self._wrap_column > 0 and self._column > 0:
            self._emit(b"\n")
            self._column = 0

    def _emit(self, data: bytes) -> None:
        self.bytes_written += write_all(self._sink, data)
