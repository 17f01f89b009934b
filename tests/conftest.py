"""Shared test fixtures for the basenc test suite.

WHY: Codec, wrapper, driver and CLI tests all need the same published
test vectors and the same misbehaving stream doubles (short reads,
failing reads, failing writes).

HOW: Module-level constants hold the RFC 4648 section 10 vectors and the
Z85 reference vector; fixtures hand out payloads and stream doubles.

RULES:
- Vectors are copied verbatim from the RFC / ZeroMQ spec:32
- Stream doubles are plain classes; no real files or pipes
"""

import io
from typing import Dict, List, Tuple

import pytest

from basenc.core.schemes import Scheme


# ---------------------------------------------------------------------------
# RFC 4648 section 10 test vectors
# ---------------------------------------------------------------------------

RFC4648_VECTORS: Dict[Scheme, List[Tuple[bytes, bytes]]] = {
    Scheme.BASE64: [
        (b"", b""),
        (b"f", b"Zg=="),
        (b"fo", b"Zm8="),
        (b"foo", b"Zm9v"),
        (b"foob", b"Zm9vYg=="),
        (b"fooba", b"Zm9vYmE="),
        (b"foobar", b"Zm9vYmFy"),
    ],
    Scheme.BASE32: [
        (b"", b""),
        (b"f", b"MY======"),
        (b"fo", b"MZXQ===="),
        (b"foo", b"MZXW6==="),
        (b"foob", b"MZXW6YQ="),
        (b"fooba", b"MZXW6YTB"),
        (b"foobar", b"MZXW6YTBOI======"),
    ],
    Scheme.BASE32HEX: [
        (b"", b""),
        (b"f", b"CO======"),
        (b"fo", b"CPNG===="),
        (b"foo", b"CPNMU==="),
        (b"foob", b"CPNMUOG="),
        (b"fooba", b"CPNMUOJ1"),
        (b"foobar", b"CPNMUOJ1E8======"),
    ],
    Scheme.BASE16: [
        (b"", b""),
        (b"f", b"66"),
        (b"fo", b"666F"),
        (b"foo", b"666F6F"),
        (b"foob", b"666F6F62"),
        (b"fooba", b"666F6F6261"),
        (b"foobar", b"666F6F626172"),
    ],
}

# ZeroMQ spec:32/Z85 reference vector
Z85_HELLO_WORLD_BYTES = bytes([0x86, 0x4F, 0xD2, 0x6F, 0xB5, 0x59, 0xF7, 0x5B])
Z85_HELLO_WORLD_TEXT = b"HelloWorld"

# Every byte value four times over, then a 3-byte tail (not a multiple of 4)
SAMPLE_PAYLOAD = bytes(range(256)) * 4 + b"end"


# ---------------------------------------------------------------------------
# Stream doubles
# ---------------------------------------------------------------------------


class TrickleSource(io.RawIOBase):
    """Readable stream that never returns more than ``step`` bytes per read."""

    def __init__(self, data: bytes, step: int = 3) -> None:
        self._data = data
        self._pos = 0
        self._step = step
        self.reads = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if size is None or size < 0:
            size = len(self._data)
        size = min(size, self._step)
        chunk = self._data[self._pos:self._pos + size]
        self._pos += len(chunk)
        return chunk


class FailingSource(io.RawIOBase):
    """Readable stream that serves ``data`` once, then raises OSError."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = data

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._data:
            chunk, self._data = self._data, b""
            return chunk
        raise OSError(5, "Input/output error")


class FailingSink(io.RawIOBase):
    """Writable stream that accepts ``limit`` writes, then raises OSError."""

    def __init__(self, limit: int = 0) -> None:
        self._limit = limit
        self.received = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        if self._limit <= 0:
            raise OSError(28, "No space left on device")
        self._limit -= 1
        self.received += bytes(data)
        return len(data)


@pytest.fixture
def sample_payload():
    """A payload covering every byte value, with an odd-sized tail."""
    return SAMPLE_PAYLOAD


@pytest.fixture
def trickle_source():
    """Factory for sources that return short reads."""
    return TrickleSource


@pytest.fixture
def failing_source():
    """Factory for sources whose reads fail."""
    return FailingSource


@pytest.fixture
def failing_sink():
    """Factory for sinks whose writes fail."""
    return FailingSink
