"""Digest algorithms, hex formatting and the batch runner."""

from hashbox.digests.algorithms import (
    ALGORITHMS,
    Algorithm,
    AlgorithmId,
    DigestUnavailableError,
    available_algorithms,
    digest_bytes,
    get_algorithm,
    is_available,
    register_backend,
)
from hashbox.digests.formatting import LetterCase, apply_case, to_hex
from hashbox.digests.runner import DigestResult, compute_digests, compute_file_digests

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "AlgorithmId",
    "DigestResult",
    "DigestUnavailableError",
    "LetterCase",
    "apply_case",
    "available_algorithms",
    "compute_digests",
    "compute_file_digests",
    "digest_bytes",
    "get_algorithm",
    "is_available",
    "register_backend",
    "to_hex",
]
