"""Sidecar checksum files (.sfv, .md5, .sha1, .sha256) next to the checked file.

A sidecar is plain text with one record per line. Only lines that split into
exactly two whitespace-separated tokens count; everything else is skipped.
SFV lines are "<filename> <crc32>"; md5sum-style lines are "<hash>  <filename>".
The record is found by looking for the sidecar's own name minus its extension
(photo.jpg.md5 -> "photo.jpg") inside the filename token. First match wins.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from hashbox.digests.algorithms import AlgorithmId

log = logging.getLogger(__name__)


class SidecarKind(Enum):
    """Sidecar file types: (file extension, algorithm it verifies, index of the filename token)."""

    SFV = (".sfv", AlgorithmId.CRC32, 0)
    MD5 = (".md5", AlgorithmId.MD5, 1)
    SHA1 = (".sha1", AlgorithmId.SHA1, 1)
    SHA256 = (".sha256", AlgorithmId.SHA256, 1)

    def __init__(self, extension: str, algorithm: AlgorithmId, name_index: int) -> None:
        self.extension = extension
        self.algorithm = algorithm
        self.name_index = name_index

    @property
    def checksum_index(self) -> int:
        return 1 - self.name_index


class ChecksumNotFoundError(LookupError):
    """No two-token line of the sidecar names the searched file."""

    def __init__(self, search: str, sidecar_path: Path) -> None:
        self.search = search
        self.sidecar_path = Path(sidecar_path)
        super().__init__(f"{search} was not found within {sidecar_path}")


def resolve_checksum(sidecar_path: Path, kind: SidecarKind) -> str:
    """
    Return the checksum recorded for the sidecar's file.

    The file is read lazily line by line. For SFV the filename is token 0 and
    token 1 is returned; for MD5/SHA1/SHA256 the filename is token 1 and token 0
    is returned. Matching is a case-sensitive substring test.

    Raises:
        ChecksumNotFoundError: no qualifying line contains the search string.
        OSError: the sidecar cannot be read.
    """
    sidecar_path = Path(sidecar_path)
    search = sidecar_path.stem
    with open(sidecar_path, encoding="utf-8-sig", errors="replace") as f:
        for line in f:
            tokens = line.split()
            if len(tokens) != 2:
                continue
            if search in tokens[kind.name_index]:
                log.debug("Found %s in %s", search, sidecar_path)
                return tokens[kind.checksum_index]
    raise ChecksumNotFoundError(search, sidecar_path)


def find_sidecar(file_path: Path, kind: SidecarKind) -> Optional[Path]:
    """
    Locate the sidecar of the given kind for a file.

    Tries <file>.<ext><sidecar-ext> first (photo.jpg.md5), then the name with the
    file's extension replaced (photo.md5). Returns None if neither exists.
    """
    file_path = Path(file_path)
    candidates = (
        file_path.with_name(file_path.name + kind.extension),
        file_path.with_name(file_path.stem + kind.extension),
    )
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_sidecar_checksums(file_path: Path) -> Tuple[Dict[AlgorithmId, str], List[str]]:
    """
    Load expected checksums from every sidecar present next to a file.

    Returns:
        (expected, errors): algorithm -> checksum for each sidecar that resolved,
        and one message per sidecar that exists but could not be resolved.
    """
    expected: Dict[AlgorithmId, str] = {}
    errors: List[str] = []
    for kind in SidecarKind:
        sidecar = find_sidecar(file_path, kind)
        if sidecar is None:
            continue
        try:
            expected[kind.algorithm] = resolve_checksum(sidecar, kind)
        except ChecksumNotFoundError as e:
            log.warning("%s", e)
            errors.append(str(e))
        except OSError as e:
            log.warning("Could not read %s: %s", sidecar, e)
            errors.append(f"Could not read {sidecar}: {e}")
        else:
            log.info("Loaded expected %s from %s", kind.algorithm.value, sidecar)
    return expected, errors
