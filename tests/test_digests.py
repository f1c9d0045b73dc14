"""Tests for the algorithm table, hex formatting and the digest batch runner."""

import re
from pathlib import Path

import pytest

from hashbox.digests import algorithms
from hashbox.digests import (
    ALGORITHMS,
    AlgorithmId,
    DigestUnavailableError,
    LetterCase,
    available_algorithms,
    compute_digests,
    compute_file_digests,
    digest_bytes,
    is_available,
    register_backend,
    to_hex,
)

# No primitive ships for these; a backend can be registered at runtime
NO_BACKEND = {AlgorithmId.DSTU7564_256, AlgorithmId.DSTU7564_384, AlgorithmId.DSTU7564_512}
# Present only when the local OpenSSL build has it
OPENSSL_ONLY = {AlgorithmId.SM3}

KNOWN_ABC = {
    AlgorithmId.BLAKE2B: (
        "ba80a53f981c4d0d6a2797b69f12f6e94c212f14685ac4b74b12bb6fdbffa2d1"
        "7d87c5392aab792dc252d5de4533cc9518d38aa8dbf1925ab92386edd4009923"
    ),
    AlgorithmId.BLAKE2S: "508c5e8c327c14e2e1a72ba34eeb452f37458b209ed63a294d999b4c86675982",
    AlgorithmId.CRC32: "352441c2",
    AlgorithmId.GOST3411: "b285056dbf18d7392d7677369524dd14747459ed8143997e163b2986f92fd42c",
    AlgorithmId.MD2: "da853b0d3f88d99b30283a69e6ded6bb",
    AlgorithmId.MD4: "a448017aaf21d8525fc10ae87aa6729d",
    AlgorithmId.MD5: "900150983cd24fb0d6963f7d28e17f72",
    AlgorithmId.RIPEMD128: "c14a12199c66e4ba84636b0f69144c77",
    AlgorithmId.RIPEMD160: "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc",
    AlgorithmId.RIPEMD256: "afbd6e228b9d8cbbcef5ca2d03e6dba10ac0bc7dcbe4680e1e42d2e975459b65",
    AlgorithmId.RIPEMD320: "de4c01b3054f8930a79d09ae738e92301e5a17085beffdc1b8d116713e74f82fa942d64cdbc4682d",
    AlgorithmId.SHA1: "a9993e364706816aba3e25717850c26c9cd0d89d",
    AlgorithmId.SHA224: "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
    AlgorithmId.SHA256: "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    AlgorithmId.SHA384: (
        "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
        "8086072ba1e7cc2358baeca134c825a7"
    ),
    AlgorithmId.SHA512: (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    ),
    AlgorithmId.SHA3: "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532",
    AlgorithmId.SHAKE: "5881092dd818bf5cf8a3ddb793fbcba74097d5c526a6d35f97b83351940f2cc8",
    AlgorithmId.SM3: "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0",
    AlgorithmId.TIGER: "2aab1484e8c158f2bfb8c5ff41b57a525129131c957b5f93",
    AlgorithmId.WHIRLPOOL: (
        "4e2448a4c6f486bb16b6562c73b4020bf3043e3a731bce721ae1b303d97e6d4c"
        "7181eebdb6c57e277d0e34957114cbd6c797fc9d95d8b582d225292076d4eef5"
    ),
}

KNOWN_EMPTY = {
    AlgorithmId.GOST3411: "981e5f3ca30c841487830f84fb433e13ac1101569b9c13584ac483234cd656c0",
    AlgorithmId.KECCAK: "6753e3380c09e385d0339eb6b050a68f66cfd60a73476e6fd6adeb72f5edd7c6f04a5d01",
    AlgorithmId.MD5: "d41d8cd98f00b204e9800998ecf8427e",
    AlgorithmId.RIPEMD128: "cdf26213a150dc3ecb610f18f6b38b46",
    AlgorithmId.RIPEMD256: "02ba4c4e5f8ecd1877fc52d64d30e37a2d9774fb1e5d026380ae0168e3c5522d",
    AlgorithmId.RIPEMD320: "22d65d5661536cdc75c1fdf5c6de7b41b9f27325ebc61e8557177d705a0ec880151c3a32a00899b8",
    AlgorithmId.SHAKE: "7f9c2ba4e88f827d616045507605853ed73b8093f6efbc88eb1a6eacfa66ef26",
    AlgorithmId.TIGER: "3293ac630c13f0245f92bbb1766e16167a4e58492dde73f3",
}


def _skip_if_missing(algorithm: AlgorithmId) -> None:
    if algorithm in OPENSSL_ONLY and not is_available(algorithm):
        pytest.skip(f"OpenSSL build has no {algorithm.value}")


def _computable() -> list:
    return [a for a in AlgorithmId if a not in NO_BACKEND and (a not in OPENSSL_ONLY or is_available(a))]


@pytest.fixture
def isolated_backends(monkeypatch):
    """Let a test add or break backends without touching the shared table."""
    monkeypatch.setattr(algorithms, "_BACKENDS", dict(algorithms._BACKENDS))
    return algorithms._BACKENDS


def test_table_covers_every_algorithm() -> None:
    """Every AlgorithmId has a table entry with a positive size and unique label."""
    assert set(ALGORITHMS) == set(AlgorithmId)
    labels = [a.label for a in ALGORITHMS.values()]
    assert len(labels) == len(set(labels))
    for algorithm in ALGORITHMS.values():
        assert algorithm.digest_size > 0


def test_every_algorithm_with_a_backend_has_a_known_vector() -> None:
    assert set(KNOWN_ABC) | set(KNOWN_EMPTY) | NO_BACKEND == set(AlgorithmId)


def test_only_dstu7564_lacks_a_backend() -> None:
    """Everything but DSTU 7564 (and SM3 on OpenSSL builds without it) computes."""
    missing = set(AlgorithmId) - set(available_algorithms())
    assert NO_BACKEND <= missing
    assert missing <= NO_BACKEND | OPENSSL_ONLY


def test_dstu7564_has_three_widths() -> None:
    sizes = [ALGORITHMS[a].digest_size for a in (
        AlgorithmId.DSTU7564_256, AlgorithmId.DSTU7564_384, AlgorithmId.DSTU7564_512
    )]
    assert sizes == [32, 48, 64]


def test_keccak_is_288_bits() -> None:
    """The Keccak row is Keccak-288: 36-byte output."""
    assert ALGORITHMS[AlgorithmId.KECCAK].digest_size == 36
    assert len(digest_bytes(AlgorithmId.KECCAK, b"abc")) == 36


@pytest.mark.parametrize("algorithm,expected", sorted(KNOWN_ABC.items()))
def test_known_vectors_abc(algorithm: AlgorithmId, expected: str) -> None:
    """Digests of b'abc' match published test vectors."""
    _skip_if_missing(algorithm)
    assert compute_digests(b"abc", [algorithm])[algorithm].hex == expected


@pytest.mark.parametrize("algorithm,expected", sorted(KNOWN_EMPTY.items()))
def test_known_vectors_empty(algorithm: AlgorithmId, expected: str) -> None:
    """Digests of the empty input match published test vectors."""
    assert compute_digests(b"", [algorithm])[algorithm].hex == expected


def test_crc32_check_value() -> None:
    """CRC32 of '123456789' is the standard check value, big-endian hex."""
    result = compute_digests(b"123456789", [AlgorithmId.CRC32], case=LetterCase.UPPER)
    assert result[AlgorithmId.CRC32].hex == "CBF43926"


@pytest.mark.parametrize("case,pattern", [(LetterCase.LOWER, r"^[0-9a-f]+$"), (LetterCase.UPPER, r"^[0-9A-F]+$")])
def test_hex_length_and_case_for_every_algorithm(case: LetterCase, pattern: str) -> None:
    """Hex output is 2 x digest size and entirely in one case."""
    data = b"The quick brown fox jumps over the lazy dog"
    selected = _computable()
    results = compute_digests(data, selected, case=case)
    assert list(results) == selected
    for algorithm, res in results.items():
        assert res.ok, res.error
        assert res.size == ALGORITHMS[algorithm].digest_size
        assert len(res.hex) == 2 * res.size
        assert re.match(pattern, res.hex)


def test_compute_is_deterministic() -> None:
    """Same bytes and same algorithm set give the same output."""
    data = bytes(range(256)) * 10
    selected = _computable()
    assert compute_digests(data, selected) == compute_digests(data, selected, max_workers=1)


def test_results_in_table_order_and_only_selected() -> None:
    selected = [AlgorithmId.SHA256, AlgorithmId.MD5, AlgorithmId.MD5]
    results = compute_digests(b"x", selected)
    assert list(results) == [AlgorithmId.MD5, AlgorithmId.SHA256]


def test_empty_selection_returns_empty_mapping() -> None:
    assert compute_digests(b"x", []) == {}


def test_failing_primitive_does_not_abort_siblings(isolated_backends) -> None:
    """An exception in one primitive becomes that algorithm's error only."""

    def boom(data: bytes) -> bytes:
        raise ValueError("primitive exploded")

    isolated_backends[AlgorithmId.MD2] = boom
    results = compute_digests(b"abc", [AlgorithmId.MD2, AlgorithmId.MD5])
    assert results[AlgorithmId.MD2].ok is False
    assert results[AlgorithmId.MD2].hex == ""
    assert "primitive exploded" in results[AlgorithmId.MD2].error
    assert results[AlgorithmId.MD5].hex == KNOWN_ABC[AlgorithmId.MD5]


def test_wrong_digest_length_is_an_error(isolated_backends) -> None:
    isolated_backends[AlgorithmId.SHA1] = lambda data: b"\x00" * 3
    res = compute_digests(b"abc", [AlgorithmId.SHA1])[AlgorithmId.SHA1]
    assert not res.ok
    assert "expected 20" in res.error


def test_missing_backend_is_unavailable(isolated_backends) -> None:
    """Algorithms without a backend raise DigestUnavailableError and report an error result."""
    with pytest.raises(DigestUnavailableError):
        digest_bytes(AlgorithmId.DSTU7564_256, b"abc")
    assert is_available(AlgorithmId.DSTU7564_256) is False
    res = compute_digests(b"abc", [AlgorithmId.DSTU7564_256, AlgorithmId.MD5])
    assert not res[AlgorithmId.DSTU7564_256].ok
    assert "DSTU7564-256" in res[AlgorithmId.DSTU7564_256].error
    assert res[AlgorithmId.MD5].hex == KNOWN_ABC[AlgorithmId.MD5]


def test_register_backend_plugs_in_and_removes(isolated_backends) -> None:
    """register_backend installs a primitive; None removes it."""
    register_backend(AlgorithmId.DSTU7564_256, lambda data: bytes(32))
    assert is_available(AlgorithmId.DSTU7564_256)
    assert compute_digests(b"", [AlgorithmId.DSTU7564_256])[AlgorithmId.DSTU7564_256].hex == "00" * 32
    register_backend(AlgorithmId.DSTU7564_256, None)
    assert not is_available(AlgorithmId.DSTU7564_256)


def test_to_hex_case() -> None:
    assert to_hex(b"\xab\x01") == "ab01"
    assert to_hex(b"\xab\x01", LetterCase.UPPER) == "AB01"


def test_compute_file_digests_reads_whole_file(tmp_path: Path) -> None:
    """compute_file_digests hashes the file content."""
    f = tmp_path / "data.bin"
    f.write_bytes(b"abc")
    results = compute_file_digests(f, [AlgorithmId.MD5, AlgorithmId.SHA1])
    assert results[AlgorithmId.MD5].hex == KNOWN_ABC[AlgorithmId.MD5]
    assert results[AlgorithmId.SHA1].hex == KNOWN_ABC[AlgorithmId.SHA1]


def test_compute_file_digests_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        compute_file_digests(tmp_path / "missing.bin", [AlgorithmId.MD5])
