"""RIPEMD-128, RIPEMD-256 and RIPEMD-320.

pycryptodome ships RIPEMD-160 only. The other widths share its message
schedule and rotate amounts: 128 and 256 run four rounds per line without the
fifth register, 256 and 320 keep both lines separate and swap one register
between them after every round.
"""

import struct
from typing import Callable, List, Sequence

_MASK = 0xFFFFFFFF

# Message word order and rotate amounts, left line then right line, 80 steps each
_R_LEFT = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
_R_RIGHT = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)
_S_LEFT = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
_S_RIGHT = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)


def _f1(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f2(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _f3(x: int, y: int, z: int) -> int:
    return (x | ~y) ^ z


def _f4(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def _f5(x: int, y: int, z: int) -> int:
    return x ^ (y | ~z)


_Func = Callable[[int, int, int], int]

_LEFT_FUNCS = (_f1, _f2, _f3, _f4, _f5)
_LEFT_K = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_RIGHT_FUNCS_4 = (_f4, _f3, _f2, _f1)
_RIGHT_K_4 = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x00000000)
_RIGHT_FUNCS_5 = (_f5, _f4, _f3, _f2, _f1)
_RIGHT_K_5 = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)

_IV_LEFT = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_IV_RIGHT = (0x76543210, 0xFEDCBA98, 0x89ABCDEF, 0x01234567, 0x3C2D1E0F)

# Register swapped between the lines after each round
_SWAP_256 = (0, 1, 2, 3)
_SWAP_320 = (1, 3, 0, 2, 4)


def _rol(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _round(
    regs: List[int],
    x: Sequence[int],
    rnd: int,
    f: _Func,
    k: int,
    order: Sequence[int],
    shifts: Sequence[int],
) -> None:
    """Sixteen steps of one line, in place. Registers keep fixed names; the target rotates."""
    n = len(regs)
    for i in range(16):
        j = 16 * rnd + i
        w = -j % n
        a, b, c, d = regs[w], regs[(w + 1) % n], regs[(w + 2) % n], regs[(w + 3) % n]
        t = _rol((a + (f(b, c, d) & _MASK) + x[order[j]] + k) & _MASK, shifts[j])
        if n == 5:
            t = (t + regs[(w + 4) % n]) & _MASK
            regs[(w + 2) % n] = _rol(c, 10)
        regs[w] = t


def _compress_128(h: List[int], x: Sequence[int]) -> List[int]:
    left = list(h)
    right = list(h)
    for rnd in range(4):
        _round(left, x, rnd, _LEFT_FUNCS[rnd], _LEFT_K[rnd], _R_LEFT, _S_LEFT)
        _round(right, x, rnd, _RIGHT_FUNCS_4[rnd], _RIGHT_K_4[rnd], _R_RIGHT, _S_RIGHT)
    a, b, c, d = left
    aa, bb, cc, dd = right
    return [
        (h[1] + c + dd) & _MASK,
        (h[2] + d + aa) & _MASK,
        (h[3] + a + bb) & _MASK,
        (h[0] + b + cc) & _MASK,
    ]


def _compress_256(h: List[int], x: Sequence[int]) -> List[int]:
    left = h[:4]
    right = h[4:]
    for rnd in range(4):
        _round(left, x, rnd, _LEFT_FUNCS[rnd], _LEFT_K[rnd], _R_LEFT, _S_LEFT)
        _round(right, x, rnd, _RIGHT_FUNCS_4[rnd], _RIGHT_K_4[rnd], _R_RIGHT, _S_RIGHT)
        i = _SWAP_256[rnd]
        left[i], right[i] = right[i], left[i]
    return [(u + v) & _MASK for u, v in zip(h, left + right)]


def _compress_320(h: List[int], x: Sequence[int]) -> List[int]:
    left = h[:5]
    right = h[5:]
    for rnd in range(5):
        _round(left, x, rnd, _LEFT_FUNCS[rnd], _LEFT_K[rnd], _R_LEFT, _S_LEFT)
        _round(right, x, rnd, _RIGHT_FUNCS_5[rnd], _RIGHT_K_5[rnd], _R_RIGHT, _S_RIGHT)
        i = _SWAP_320[rnd]
        left[i], right[i] = right[i], left[i]
    return [(u + v) & _MASK for u, v in zip(h, left + right)]


def _digest(data: bytes, iv: Sequence[int], compress: Callable[[List[int], Sequence[int]], List[int]]) -> bytes:
    bit_length = (len(data) * 8) & 0xFFFFFFFFFFFFFFFF
    padded = data + b"\x80" + bytes((55 - len(data)) % 64) + bit_length.to_bytes(8, "little")
    h = list(iv)
    for off in range(0, len(padded), 64):
        h = compress(h, struct.unpack("<16I", padded[off:off + 64]))
    return struct.pack(f"<{len(h)}I", *h)


def ripemd128(data: bytes) -> bytes:
    return _digest(data, _IV_LEFT[:4], _compress_128)


def ripemd256(data: bytes) -> bytes:
    return _digest(data, _IV_LEFT[:4] + _IV_RIGHT[:4], _compress_256)


def ripemd320(data: bytes) -> bytes:
    return _digest(data, _IV_LEFT + _IV_RIGHT, _compress_320)
