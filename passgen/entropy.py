"""
Random byte suppliers and bit planning.

A random source fills caller-provided buffers completely or raises
InsufficientEntropyError. Production code always uses SystemRandomSource;
StreamRandomSource exists so tests can feed known bytes or an exhausted
stream.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Protocol

from .errors import InsufficientEntropyError
from .universe import bits_per_symbol

__all__ = [
    "BitPlan",
    "RandomSource",
    "StreamRandomSource",
    "SystemRandomSource",
    "random_buffer",
]


class RandomSource(Protocol):
    def fill(self, buffer: bytearray | memoryview) -> None:
        """Fill the whole buffer with random bytes or raise."""
        ...


class SystemRandomSource:
    """
    OS-backed CSPRNG (getrandom / CryptGenRandom via os.urandom).

    Every call reads fresh bytes, and os.urandom is safe to call from
    several threads at once, so one instance can be shared.
    """

    def fill(self, buffer: bytearray | memoryview) -> None:
        view = memoryview(buffer).cast("B")
        try:
            view[:] = os.urandom(view.nbytes)
        except OSError as exc:
            raise InsufficientEntropyError(
                f"system random source failed to supply {view.nbytes} bytes"
            ) from exc

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class StreamRandomSource:
    """
    Read random bytes from a binary stream (file, pipe, io.BytesIO).

    Bytes are consumed from the stream and never handed out twice.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def fill(self, buffer: bytearray | memoryview) -> None:
        view = memoryview(buffer).cast("B")
        filled = 0
        try:
            while filled < view.nbytes:
                n = self._read_into(view[filled:])
                if not n:
                    break
                filled += n
        except OSError as exc:
            raise InsufficientEntropyError(
                f"random stream failed after {filled} of {view.nbytes} bytes"
            ) from exc
        if filled < view.nbytes:
            raise InsufficientEntropyError(
                f"random stream exhausted after {filled} of {view.nbytes} bytes"
            )

    def _read_into(self, view: memoryview) -> int:
        readinto = getattr(self.stream, "readinto", None)
        if readinto is not None:
            return readinto(view) or 0
        data = self.stream.read(view.nbytes)
        if not data:
            return 0
        view[: len(data)] = data
        return len(data)


def random_buffer(source: RandomSource, size: int) -> bytearray:
    """Allocate a fresh buffer of `size` bytes and have the source fill it."""
    buf = bytearray(size)
    source.fill(buf)
    return buf


@dataclass(frozen=True)
class BitPlan:
    """
    How many random bits and bytes one artifact consumes.
    """

    bits_per_symbol: int
    bits_per_artifact: int
    bytes_per_artifact: int

    @classmethod
    def for_universe(cls, universe_size: int, length: int) -> BitPlan:
        bits = bits_per_symbol(universe_size)
        total_bits = bits * length
        # A trailing partial byte still has to be read in full.
        total_bytes = (total_bits + 7) // 8
        return cls(bits, total_bits, total_bytes)
