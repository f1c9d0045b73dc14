"""Tiger (192-bit, original 0x01 padding).

The four S-boxes are not stored: they are regenerated once from the seed
string the Tiger authors publish, using the compression function itself.
"""

import struct
from functools import lru_cache
from typing import List, Sequence, Tuple

_MASK = 0xFFFFFFFFFFFFFFFF

_IV = (0x0123456789ABCDEF, 0xFEDCBA9876543210, 0xF096A5B4C3B2E187)
_SEED = b"Tiger - A Fast New Hash Function, by Ross Anderson and Eli Biham"
_SBOX_PASSES = 5


def _round(a: int, b: int, c: int, x: int, mul: int, t: Sequence[int]) -> Tuple[int, int, int]:
    c ^= x
    a = (a - (
        t[c & 0xFF]
        ^ t[256 + ((c >> 16) & 0xFF)]
        ^ t[512 + ((c >> 32) & 0xFF)]
        ^ t[768 + ((c >> 48) & 0xFF)]
    )) & _MASK
    b = (b + (
        t[768 + ((c >> 8) & 0xFF)]
        ^ t[512 + ((c >> 24) & 0xFF)]
        ^ t[256 + ((c >> 40) & 0xFF)]
        ^ t[(c >> 56) & 0xFF]
    )) & _MASK
    b = (b * mul) & _MASK
    return a, b, c


def _pass(a: int, b: int, c: int, x: Sequence[int], mul: int, t: Sequence[int]) -> Tuple[int, int, int]:
    a, b, c = _round(a, b, c, x[0], mul, t)
    b, c, a = _round(b, c, a, x[1], mul, t)
    c, a, b = _round(c, a, b, x[2], mul, t)
    a, b, c = _round(a, b, c, x[3], mul, t)
    b, c, a = _round(b, c, a, x[4], mul, t)
    c, a, b = _round(c, a, b, x[5], mul, t)
    a, b, c = _round(a, b, c, x[6], mul, t)
    b, c, a = _round(b, c, a, x[7], mul, t)
    return a, b, c


def _key_schedule(x: List[int]) -> List[int]:
    x0, x1, x2, x3, x4, x5, x6, x7 = x
    x0 = (x0 - (x7 ^ 0xA5A5A5A5A5A5A5A5)) & _MASK
    x1 ^= x0
    x2 = (x2 + x1) & _MASK
    x3 = (x3 - (x2 ^ (((x1 ^ _MASK) << 19) & _MASK))) & _MASK
    x4 ^= x3
    x5 = (x5 + x4) & _MASK
    x6 = (x6 - (x5 ^ ((x4 ^ _MASK) >> 23))) & _MASK
    x7 ^= x6
    x0 = (x0 + x7) & _MASK
    x1 = (x1 - (x0 ^ (((x7 ^ _MASK) << 19) & _MASK))) & _MASK
    x2 ^= x1
    x3 = (x3 + x2) & _MASK
    x4 = (x4 - (x3 ^ ((x2 ^ _MASK) >> 23))) & _MASK
    x5 ^= x4
    x6 = (x6 + x5) & _MASK
    x7 = (x7 - (x6 ^ 0x0123456789ABCDEF)) & _MASK
    return [x0, x1, x2, x3, x4, x5, x6, x7]


def _compress(state: Sequence[int], block: Sequence[int], t: Sequence[int]) -> Tuple[int, int, int]:
    a, b, c = state
    x = list(block)
    a, b, c = _pass(a, b, c, x, 5, t)
    x = _key_schedule(x)
    c, a, b = _pass(c, a, b, x, 7, t)
    x = _key_schedule(x)
    b, c, a = _pass(b, c, a, x, 9, t)
    return a ^ state[0], (b - state[1]) & _MASK, (c + state[2]) & _MASK


def _swap_byte(table: List[int], i: int, j: int, col: int) -> None:
    mask = 0xFF << (8 * col)
    bi = table[i] & mask
    bj = table[j] & mask
    table[i] = (table[i] & ~mask) | bj
    table[j] = (table[j] & ~mask) | bi


@lru_cache(maxsize=1)
def sboxes() -> Tuple[int, ...]:
    """The 4 x 256 64-bit S-box entries, t1 first."""
    table = [(i & 0xFF) * 0x0101010101010101 for i in range(1024)]
    seed = struct.unpack("<8Q", _SEED)
    state = _IV
    abc = 2
    for _ in range(_SBOX_PASSES):
        for i in range(256):
            for sb in range(0, 1024, 256):
                abc += 1
                if abc == 3:
                    abc = 0
                    state = _compress(state, seed, table)
                word = state[abc]
                for col in range(8):
                    _swap_byte(table, sb + i, sb + ((word >> (8 * col)) & 0xFF), col)
    return tuple(table)


def tiger(data: bytes) -> bytes:
    t = sboxes()
    bit_length = (len(data) * 8) & _MASK
    padded = data + b"\x01" + bytes((55 - len(data)) % 64) + bit_length.to_bytes(8, "little")
    state: Tuple[int, int, int] = _IV
    for off in range(0, len(padded), 64):
        state = _compress(state, struct.unpack("<8Q", padded[off:off + 64]), t)
    return struct.pack("<3Q", *state)
