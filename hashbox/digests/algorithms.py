"""Supported digest algorithms and the primitives that compute them.

Every algorithm has a fixed output size. Primitives come from pycryptodome
(Crypto.Hash) where it has them, from the Whirlpool package, from hashlib for
SM3 when the local OpenSSL build exposes it, and from zlib for CRC32. Keccak-288,
Tiger, RIPEMD-128/256/320 and GOST R 34.11-94 are computed by the modules next
to this one. Algorithms without a primitive (DSTU 7564) stay in the table and
raise DigestUnavailableError until a backend is registered with
register_backend().
"""

import hashlib
import logging
import zlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

import whirlpool
from Crypto.Hash import (
    BLAKE2b,
    BLAKE2s,
    MD2,
    MD4,
    MD5,
    RIPEMD160,
    SHA1,
    SHA224,
    SHA256,
    SHA384,
    SHA512,
    SHA3_256,
    SHAKE128,
)

from hashbox.digests.gost94 import gost3411
from hashbox.digests.keccak import keccak288
from hashbox.digests.ripemd import ripemd128, ripemd256, ripemd320
from hashbox.digests.tiger import tiger

log = logging.getLogger(__name__)

# Primitive: full input buffer -> digest bytes
DigestFn = Callable[[bytes], bytes]


class DigestUnavailableError(RuntimeError):
    """No installed library provides a primitive for the algorithm."""


class AlgorithmId(str, Enum):
    """Closed set of digest algorithms, in display order."""

    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"
    CRC32 = "crc32"
    DSTU7564_256 = "dstu7564-256"
    DSTU7564_384 = "dstu7564-384"
    DSTU7564_512 = "dstu7564-512"
    GOST3411 = "gost3411"
    KECCAK = "keccak"
    MD2 = "md2"
    MD4 = "md4"
    MD5 = "md5"
    RIPEMD128 = "ripemd128"
    RIPEMD160 = "ripemd160"
    RIPEMD256 = "ripemd256"
    RIPEMD320 = "ripemd320"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3 = "sha3"
    SHAKE = "shake"
    SM3 = "sm3"
    TIGER = "tiger"
    WHIRLPOOL = "whirlpool"


@dataclass(frozen=True)
class Algorithm:
    """One row of the algorithm table: what to run and how long its output is."""

    id: AlgorithmId
    label: str
    digest_size: int


def _crc32(data: bytes) -> bytes:
    return (zlib.crc32(data) & 0xFFFFFFFF).to_bytes(4, "big")


def _openssl(name: str) -> DigestFn:
    """Primitive backed by hashlib.new(name); unavailable if OpenSSL lacks it."""

    def digest(data: bytes) -> bytes:
        try:
            h = hashlib.new(name)
        except ValueError as e:
            raise DigestUnavailableError(f"hashlib has no '{name}' digest: {e}") from e
        h.update(data)
        return h.digest()

    return digest


ALGORITHMS: Dict[AlgorithmId, Algorithm] = {
    a.id: a
    for a in (
        Algorithm(AlgorithmId.BLAKE2B, "BLAKE2b", 64),
        Algorithm(AlgorithmId.BLAKE2S, "BLAKE2s", 32),
        Algorithm(AlgorithmId.CRC32, "CRC32", 4),
        Algorithm(AlgorithmId.DSTU7564_256, "DSTU7564-256", 32),
        Algorithm(AlgorithmId.DSTU7564_384, "DSTU7564-384", 48),
        Algorithm(AlgorithmId.DSTU7564_512, "DSTU7564-512", 64),
        Algorithm(AlgorithmId.GOST3411, "GOST3411", 32),
        Algorithm(AlgorithmId.KECCAK, "Keccak", 36),
        Algorithm(AlgorithmId.MD2, "MD2", 16),
        Algorithm(AlgorithmId.MD4, "MD4", 16),
        Algorithm(AlgorithmId.MD5, "MD5", 16),
        Algorithm(AlgorithmId.RIPEMD128, "RIPEMD-128", 16),
        Algorithm(AlgorithmId.RIPEMD160, "RIPEMD-160", 20),
        Algorithm(AlgorithmId.RIPEMD256, "RIPEMD-256", 32),
        Algorithm(AlgorithmId.RIPEMD320, "RIPEMD-320", 40),
        Algorithm(AlgorithmId.SHA1, "SHA-1", 20),
        Algorithm(AlgorithmId.SHA224, "SHA-224", 28),
        Algorithm(AlgorithmId.SHA256, "SHA-256", 32),
        Algorithm(AlgorithmId.SHA384, "SHA-384", 48),
        Algorithm(AlgorithmId.SHA512, "SHA-512", 64),
        Algorithm(AlgorithmId.SHA3, "SHA-3", 32),
        Algorithm(AlgorithmId.SHAKE, "SHAKE", 32),
        Algorithm(AlgorithmId.SM3, "SM3", 32),
        Algorithm(AlgorithmId.TIGER, "Tiger", 24),
        Algorithm(AlgorithmId.WHIRLPOOL, "Whirlpool", 64),
    )
}

_BACKENDS: Dict[AlgorithmId, DigestFn] = {
    AlgorithmId.BLAKE2B: lambda data: BLAKE2b.new(data=data, digest_bits=512).digest(),
    AlgorithmId.BLAKE2S: lambda data: BLAKE2s.new(data=data, digest_bits=256).digest(),
    AlgorithmId.CRC32: _crc32,
    AlgorithmId.GOST3411: gost3411,
    AlgorithmId.KECCAK: keccak288,
    AlgorithmId.MD2: lambda data: MD2.new(data=data).digest(),
    AlgorithmId.MD4: lambda data: MD4.new(data=data).digest(),
    AlgorithmId.MD5: lambda data: MD5.new(data=data).digest(),
    AlgorithmId.RIPEMD128: ripemd128,
    AlgorithmId.RIPEMD160: lambda data: RIPEMD160.new(data=data).digest(),
    AlgorithmId.RIPEMD256: ripemd256,
    AlgorithmId.RIPEMD320: ripemd320,
    AlgorithmId.SHA1: lambda data: SHA1.new(data=data).digest(),
    AlgorithmId.SHA224: lambda data: SHA224.new(data=data).digest(),
    AlgorithmId.SHA256: lambda data: SHA256.new(data=data).digest(),
    AlgorithmId.SHA384: lambda data: SHA384.new(data=data).digest(),
    AlgorithmId.SHA512: lambda data: SHA512.new(data=data).digest(),
    AlgorithmId.SHA3: lambda data: SHA3_256.new(data=data).digest(),
    # SHAKE128 read to the same 32 bytes the 128-bit security level implies
    AlgorithmId.SHAKE: lambda data: SHAKE128.new(data=data).read(32),
    AlgorithmId.SM3: _openssl("sm3"),
    AlgorithmId.TIGER: tiger,
    AlgorithmId.WHIRLPOOL: lambda data: whirlpool.new(data).digest(),
}


def get_algorithm(algorithm: AlgorithmId) -> Algorithm:
    """Table entry for an algorithm identifier."""
    return ALGORITHMS[AlgorithmId(algorithm)]


def register_backend(algorithm: AlgorithmId, fn: Optional[DigestFn]) -> None:
    """Install (or with None, remove) the primitive used for an algorithm."""
    algorithm = AlgorithmId(algorithm)
    if fn is None:
        _BACKENDS.pop(algorithm, None)
        log.debug("Removed digest backend for %s", algorithm.value)
        return
    _BACKENDS[algorithm] = fn
    log.debug("Registered digest backend for %s", algorithm.value)


def digest_bytes(algorithm: AlgorithmId, data: bytes) -> bytes:
    """
    Run the algorithm's primitive over the whole buffer.

    Raises:
        DigestUnavailableError: no backend is installed for the algorithm.
    """
    algorithm = AlgorithmId(algorithm)
    fn = _BACKENDS.get(algorithm)
    if fn is None:
        raise DigestUnavailableError(f"No digest backend installed for {ALGORITHMS[algorithm].label}")
    return fn(data)


def is_available(algorithm: AlgorithmId) -> bool:
    """True if a primitive for the algorithm works in this environment."""
    try:
        digest_bytes(algorithm, b"")
    except DigestUnavailableError:
        return False
    return True


def available_algorithms() -> List[AlgorithmId]:
    """Algorithms with a working primitive, in table order."""
    return [a for a in ALGORITHMS if is_available(a)]
