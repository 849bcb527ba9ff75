from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np

from sha1ref.constants import DIGEST_SIZE
from sha1ref.sha import sha1


DIGEST_BITS = DIGEST_SIZE * 8


@dataclass
class AvalancheReport:
    flips: int
    mean: float
    minimum: int
    maximum: int

    @property
    def ratio(self) -> float:
        """Mean fraction of digest bits that changed per single-bit flip."""
        return self.mean / DIGEST_BITS


def flip_bit(data: bytes, index: int) -> bytes:
    # bit 0 is the most significant bit of byte 0
    if not (0 <= index < len(data) * 8):
        raise IndexError(f"bit index {index} out of range for {len(data)} bytes")
    flipped = bytearray(data)
    flipped[index // 8] ^= 0x80 >> (index % 8)
    return bytes(flipped)


def bit_difference(left: bytes, right: bytes) -> int:
    if len(left) != len(right):
        raise ValueError("Inputs must have equal length")
    a = np.frombuffer(left, dtype=np.uint8)
    b = np.frombuffer(right, dtype=np.uint8)
    return int(np.unpackbits(a ^ b).sum())


def avalanche_profile(
    data: bytes,
    indices: Optional[Iterable[int]] = None,
    digest: Callable[[bytes], bytes] = sha1,
) -> np.ndarray:
    """Count changed digest bits for each single-bit flip of ``data``.

    When ``indices`` is omitted every bit of the input is flipped in turn.
    """
    data = bytes(data)
    if not data:
        raise ValueError("Avalanche analysis needs at least one input byte")

    if indices is None:
        indices = range(len(data) * 8)

    reference = digest(data)
    return np.array(
        [bit_difference(reference, digest(flip_bit(data, i))) for i in indices],
        dtype=np.int64,
    )


def analyse(data: bytes, samples: Optional[int] = None, seed: Optional[int] = None) -> AvalancheReport:
    total_bits = len(data) * 8
    indices = None
    if samples is not None and total_bits:
        if samples < 1:
            raise ValueError("samples must be positive")
        rng = np.random.default_rng(seed)
        count = min(samples, total_bits)
        indices = rng.choice(total_bits, size=count, replace=False).tolist()

    counts = avalanche_profile(data, indices)
    return AvalancheReport(
        flips=int(counts.size),
        mean=float(counts.mean()),
        minimum=int(counts.min()),
        maximum=int(counts.max()),
    )
