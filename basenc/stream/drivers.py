"""Stream drivers: chunked encode and decode runs.

WHY: The codecs are pure functions over finite blocks. Something has to
pull bounded chunks from an arbitrarily large source, push results to
the sink as soon as they exist, and run the end-of-input checks once
the source is exhausted.

HOW: encode_stream() fills fixed-size chunks (looping over short reads),
encodes each one and routes the symbols through a WrapWriter. Encode
chunks are a multiple of the scheme's input group, so only the final
chunk can end in a partial group. decode_stream() feeds each chunk to
the codec's SymbolDecoder, which carries any incomplete group into the
next chunk, writes decoded bytes immediately, and calls finish() at end
of input for the trailing-group rules.

RULES:
- Linear: read → transform → write, repeated until end of input or error
- Every failure propagates as a BasencError subclass; nothing is retried
- Decoded bytes already written stay written when a later chunk fails
- Chunk sizes must be positive multiples of the scheme's group width
- Drivers flush the sink but never close source or sink
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional

from basenc import config
from basenc.codecs import get_codec
from basenc.core.errors import (
    BasencError,
    InvalidInputError,
    SinkWriteError,
    SourceReadError,
)
from basenc.core.schemes import Scheme
from basenc.stream.wrapper import WrapWriter, write_all

logger = logging.getLogger(__name__)


@dataclass
class StreamResult:
    """Progress markers of one finished run.

    Attributes:
        scheme: The scheme the run used.
        bytes_read: Bytes consumed from the source.
        bytes_written: Bytes handed to the sink (line breaks included).
        chunks: Non-empty chunks processed.
    """

    scheme: Scheme
    bytes_read: int = 0
    bytes_written: int = 0
    chunks: int = 0


def read_block(source: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, looping over short reads.

    Returns fewer than ``size`` bytes only at end of input.

    Raises:
        SourceReadError: If the source raises OSError.
    """
    parts = []
    remaining = size
    while remaining > 0:
        try:
            data = source.read(remaining)
        except OSError as exc:
            raise SourceReadError() from exc
        if not data:
            break
        parts.append(data)
        remaining -= len(data)
    return b"".join(parts)


def _check_chunk_size(chunk_size: int, group: int) -> None:
    if chunk_size <= 0 or chunk_size % group:
        raise ValueError(
            "chunk size must be a positive multiple of {}, got {}".format(group, chunk_size)
        )


def _flush(sink: BinaryIO) -> None:
    flush = getattr(sink, "flush", None)
    if flush is None:
        return
    try:
        flush()
    except OSError as exc:
        raise SinkWriteError() from exc


def encode_stream(
    source: BinaryIO,
    sink: BinaryIO,
    scheme: Scheme | str,
    wrap_column: Optional[int] = None,
    chunk_size: Optional[int] = None,
) -> StreamResult:
    """Encode everything readable from ``source`` into ``sink``.

    Args:
        source: Readable binary stream.
        sink: Writable binary stream.
        scheme: Scheme or scheme name.
        wrap_column: Symbols per line, 0 for no wrapping
                     (default: config.DEFAULT_WRAP_COLUMN).
        chunk_size: Bytes per read (default: config.ENCODE_CHUNK_SIZE).

    Returns:
        StreamResult with the byte counts of the run.

    Raises:
        SourceReadError, SinkWriteError, MisalignedLengthError,
        UnsupportedSchemeError; ValueError for a bad wrap column or chunk size.
    """
    codec = get_codec(scheme)
    if wrap_column is None:
        wrap_column = config.DEFAULT_WRAP_COLUMN
    if chunk_size is None:
        chunk_size = config.ENCODE_CHUNK_SIZE
    _check_chunk_size(chunk_size, codec.input_group)

    writer = WrapWriter(sink, wrap_column)
    result = StreamResult(scheme=codec.scheme)
    logger.debug(
        "Encoding %s: chunk_size=%d wrap_column=%d", codec.scheme.value, chunk_size, wrap_column,
    )

    try:
        while True:
            block = read_block(source, chunk_size)
            if not block:
                break
            result.bytes_read += len(block)
            result.chunks += 1
            writer.write(codec.encode(block))
            if len(block) < chunk_size:
                break
        writer.finish()
        _flush(sink)
    except BasencError as exc:
        logger.debug(
            "%s encode failed after %d bytes: %s", codec.scheme.value, result.bytes_read, exc,
        )
        raise
    finally:
        result.bytes_written = writer.bytes_written

    logger.debug(
        "Encoded %d bytes into %d bytes (%d chunks)",
        result.bytes_read, result.bytes_written, result.chunks,
    )
    return result


def decode_stream(
    source: BinaryIO,
    sink: BinaryIO,
    scheme: Scheme | str,
    ignore_garbage: bool = False,
    chunk_size: Optional[int] = None,
) -> StreamResult:
    """Decode everything readable from ``source`` into ``sink``.

    Args:
        source: Readable binary stream of encoded text.
        sink: Writable binary stream for the decoded bytes.
        scheme: Scheme or scheme name.
        ignore_garbage: Skip non-alphabet bytes instead of failing.
        chunk_size: Bytes per read (default: config.DECODE_CHUNK_SIZE).

    Returns:
        StreamResult with the byte counts of the run.

    Raises:
        SourceReadError, SinkWriteError, InvalidInputError,
        MisalignedLengthError, UnsupportedSchemeError; ValueError for a
        bad chunk size.
    """
    codec = get_codec(scheme)
    if chunk_size is None:
        chunk_size = config.DECODE_CHUNK_SIZE
    _check_chunk_size(chunk_size, codec.output_group)

    decoder = codec.decoder(ignore_garbage)
    result = StreamResult(scheme=codec.scheme)
    logger.debug(
        "Decoding %s: chunk_size=%d ignore_garbage=%s",
        codec.scheme.value, chunk_size, ignore_garbage,
    )

    try:
        while True:
            block = read_block(source, chunk_size)
            if not block:
                break
            result.bytes_read += len(block)
            result.chunks += 1
            try:
                decoded = decoder.feed(block)
            except InvalidInputError as exc:
                result.bytes_written += write_all(sink, exc.decoded)
                raise
            result.bytes_written += write_all(sink, decoded)
            if len(block) < chunk_size:
                break
        result.bytes_written += write_all(sink, decoder.finish())
        _flush(sink)
    except BasencError as exc:
        logger.debug(
            "%s decode failed after %d bytes: %s", codec.scheme.value, result.bytes_read, exc,
        )
        raise

    logger.debug(
        "Decoded %d bytes into %d bytes (%d chunks, %d symbols)",
        result.bytes_read, result.bytes_written, result.chunks, decoder.symbols,
    )
    return result


def encode_bytes(data: bytes, scheme: Scheme | str, wrap_column: int = 0) -> bytes:
    """Encode an in-memory buffer; a thin wrapper over encode_stream()."""
    sink = io.BytesIO()
    encode_stream(io.BytesIO(data), sink, scheme, wrap_column=wrap_column)
    return sink.getvalue()


def decode_bytes(text: bytes | str, scheme: Scheme | str, ignore_garbage: bool = False) -> bytes:
    """Decode an in-memory buffer; a thin wrapper over decode_stream()."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    sink = io.BytesIO()
    decode_stream(io.BytesIO(text), sink, scheme, ignore_garbage=ignore_garbage)
    return sink.getvalue()
