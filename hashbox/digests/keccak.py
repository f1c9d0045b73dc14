"""Keccak sponge with the original (pre-FIPS 202) padding.

pycryptodome only offers Keccak at 224/256/384/512 bits. The table's Keccak
row is Keccak-288 (rate 1024 bits, capacity 576 bits), so the permutation
lives here and any output width can be requested.
"""

from typing import List

_MASK = 0xFFFFFFFFFFFFFFFF

_ROUND_CONSTANTS = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)


def _rotation_offsets() -> List[int]:
    offsets = [0] * 25
    x, y = 1, 0
    for t in range(24):
        offsets[x + 5 * y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    return offsets


_ROTATIONS = _rotation_offsets()


def _rol(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK


def keccak_f1600(state: List[int]) -> List[int]:
    """Keccak-f[1600] over 25 lanes, lane (x, y) at index x + 5*y."""
    a = state
    for rc in _ROUND_CONSTANTS:
        # theta
        c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ _rol(c[(x + 1) % 5], 1) for x in range(5)]
        a = [a[i] ^ d[i % 5] for i in range(25)]
        # rho and pi
        b = [0] * 25
        for x in range(5):
            for y in range(5):
                b[y + 5 * ((2 * x + 3 * y) % 5)] = _rol(a[x + 5 * y], _ROTATIONS[x + 5 * y])
        # chi
        a = [
            b[i] ^ (~b[(i + 1) % 5 + 5 * (i // 5)] & b[(i + 2) % 5 + 5 * (i // 5)])
            for i in range(25)
        ]
        # iota
        a[0] ^= rc
    return a


def keccak(data: bytes, digest_size: int) -> bytes:
    """
    Keccak digest of digest_size bytes; capacity is twice the output width.

    Padding is pad10*1 with no domain bits (first pad byte 0x01), as in the
    Keccak submission and BouncyCastle's KeccakDigest.
    """
    rate = 200 - 2 * digest_size
    if digest_size <= 0 or rate <= 0 or rate % 8:
        raise ValueError(f"Unsupported Keccak output size: {digest_size} bytes")
    padded = bytearray(data)
    padded.append(0x01)
    padded.extend(bytes(-len(padded) % rate))
    padded[-1] |= 0x80
    state = [0] * 25
    for off in range(0, len(padded), rate):
        for i in range(rate // 8):
            state[i] ^= int.from_bytes(padded[off + 8 * i:off + 8 * i + 8], "little")
        state = keccak_f1600(state)
    out = bytearray()
    while True:
        out.extend(b"".join(lane.to_bytes(8, "little") for lane in state[: rate // 8]))
        if len(out) >= digest_size:
            return bytes(out[:digest_size])
        state = keccak_f1600(state)


def keccak288(data: bytes) -> bytes:
    return keccak(data, 36)
