"""
Mapping logic: slice a random byte buffer into fixed-width bit groups and
turn each group into an index of a symbol universe.
"""

from __future__ import annotations

from typing import List, Sequence


def extract_indices(
    buffer: bytes | bytearray | memoryview,
    bits_per_symbol: int,
    count: int,
    universe_size: int,
) -> List[int]:
    """
    Read `count` indices out of `buffer`.

    We:
    - Treat the buffer as one big-endian bitstream (MSB of byte 0 first).
    - Take `bits_per_symbol` consecutive bits per index, never resetting
      the bit cursor between indices.
    - Reduce each value with modulo into [0, universe_size).

    The modulo reduction is biased whenever universe_size is not a power
    of two. It is kept as is so that a given buffer always yields the
    same indices.
    """
    data = memoryview(buffer).cast("B")
    needed_bits = bits_per_symbol * count
    assert data.nbytes * 8 >= needed_bits, (
        f"buffer holds {data.nbytes * 8} bits, {needed_bits} required"
    )

    indices: list[int] = []
    bit_idx = 0

    for _ in range(count):
        value = 0
        for _ in range(bits_per_symbol):
            byte = data[bit_idx >> 3]
            # Extract bits from MSB to LSB
            bit = (byte >> (7 - (bit_idx & 7))) & 1
            value = (value << 1) | bit
            bit_idx += 1

        indices.append(value % universe_size)

    return indices


def indices_to_symbols(indices: Sequence[int], symbols: Sequence[str]) -> List[str]:
    """Look up each index in the symbol sequence."""
    return [symbols[i] for i in indices]
