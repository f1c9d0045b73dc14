"""Digest batch runner: compute every selected digest over one in-memory buffer.

Each job reads the same immutable buffer and writes its own result, so jobs run
concurrently on a small thread pool. A job that fails (missing backend, library
error, wrong output length) produces an error result for its own algorithm;
sibling jobs are unaffected.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from hashbox.digests.algorithms import ALGORITHMS, AlgorithmId, digest_bytes
from hashbox.digests.formatting import LetterCase, to_hex

log = logging.getLogger(__name__)

DIGEST_MAX_WORKERS = 4


@dataclass(frozen=True)
class DigestResult:
    """Outcome of one digest job. hex is empty when error is set."""

    algorithm: AlgorithmId
    hex: str
    size: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _run_job(algorithm: AlgorithmId, data: bytes) -> Tuple[AlgorithmId, Optional[bytes], Optional[str]]:
    """Returns (algorithm, digest, None) on success, (algorithm, None, message) on failure."""
    expected_size = ALGORITHMS[algorithm].digest_size
    try:
        digest = digest_bytes(algorithm, data)
    except Exception as e:
        return (algorithm, None, str(e) or e.__class__.__name__)
    if len(digest) != expected_size:
        return (
            algorithm,
            None,
            f"{ALGORITHMS[algorithm].label} returned {len(digest)} bytes, expected {expected_size}",
        )
    return (algorithm, digest, None)


def compute_digests(
    data: bytes,
    selected: Iterable[AlgorithmId],
    case: LetterCase = LetterCase.LOWER,
    max_workers: int = DIGEST_MAX_WORKERS,
) -> Dict[AlgorithmId, DigestResult]:
    """
    Compute the selected digests over data.

    Args:
        data: Full content of the file being checked.
        selected: Algorithms to run; duplicates are ignored.
        case: Letter case of every hex string in the output.
        max_workers: Thread pool size for the batch.

    Returns:
        Mapping algorithm -> DigestResult in algorithm table order.
    """
    wanted = {AlgorithmId(a) for a in selected}
    jobs = [a for a in ALGORITHMS if a in wanted]
    if not jobs:
        return {}
    log.debug("Computing %d digests over %d bytes", len(jobs), len(data))
    finished: Dict[AlgorithmId, DigestResult] = {}
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(jobs)))) as executor:
        futures = {executor.submit(_run_job, a, data): a for a in jobs}
        for fut in as_completed(futures):
            algorithm, digest, error = fut.result()
            size = ALGORITHMS[algorithm].digest_size
            if error is not None:
                log.warning("Digest %s failed: %s", algorithm.value, error)
                finished[algorithm] = DigestResult(algorithm, "", size, error)
                continue
            finished[algorithm] = DigestResult(algorithm, to_hex(digest, case), size)
    return {a: finished[a] for a in jobs}


def compute_file_digests(
    path: Path,
    selected: Iterable[AlgorithmId],
    case: LetterCase = LetterCase.LOWER,
    max_workers: int = DIGEST_MAX_WORKERS,
) -> Dict[AlgorithmId, DigestResult]:
    """Read the whole file into memory and compute the selected digests. OSError propagates."""
    data = Path(path).read_bytes()
    log.info("Read %s (%d bytes)", path, len(data))
    return compute_digests(data, selected, case=case, max_workers=max_workers)
