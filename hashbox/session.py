"""State behind the main window: selected file and one row per algorithm.

The window binds its widgets to HashSession rows instead of looking widgets up
by name; select-all, clear and calculate are plain loops over the table.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from hashbox.compare import MatchState, compare_digest
from hashbox.digests.algorithms import ALGORITHMS, AlgorithmId
from hashbox.digests.formatting import LetterCase, apply_case
from hashbox.digests.runner import DigestResult, compute_digests
from hashbox.sidecar import load_sidecar_checksums

log = logging.getLogger(__name__)


@dataclass
class AlgorithmRow:
    """Selected flag, shown result, expected value and last error of one algorithm."""

    algorithm: AlgorithmId
    selected: bool = False
    result: str = ""
    expected: str = ""
    error: Optional[str] = None


class HashSession:
    """
    One "select file -> compute -> compare" cycle. Results are overwritten on
    every calculate(); nothing here is persisted.
    """

    def __init__(
        self,
        case: LetterCase = LetterCase.LOWER,
        selected: Iterable[AlgorithmId] = (),
        read_bytes: Callable[[Path], bytes] = lambda p: Path(p).read_bytes(),
    ) -> None:
        self.file_path: Optional[Path] = None
        self.case = LetterCase(case)
        self.rows: Dict[AlgorithmId, AlgorithmRow] = {a: AlgorithmRow(a) for a in ALGORITHMS}
        self._read_bytes = read_bytes
        for a in selected:
            self.rows[AlgorithmId(a)].selected = True

    def selected_algorithms(self) -> List[AlgorithmId]:
        return [a for a, row in self.rows.items() if row.selected]

    def select_all(self) -> None:
        for row in self.rows.values():
            row.selected = True

    def select_none(self) -> None:
        for row in self.rows.values():
            row.selected = False

    def clear(self) -> None:
        """Blank every result and expected value."""
        for row in self.rows.values():
            row.result = ""
            row.expected = ""
            row.error = None

    def select_file(self, path: Path) -> List[str]:
        """
        Make path the file to check, clear old values and load expected checksums
        from any sidecar next to it. Returns sidecar error messages (may be empty).
        """
        self.file_path = Path(path)
        self.clear()
        log.info("Selected %s", self.file_path)
        expected, errors = load_sidecar_checksums(self.file_path)
        for algorithm, value in expected.items():
            self.rows[algorithm].expected = value
        return errors

    def set_case(self, case: LetterCase) -> None:
        """Switch display case; shown results follow."""
        self.case = LetterCase(case)
        for row in self.rows.values():
            if row.result:
                row.result = apply_case(row.result, self.case)

    def calculate(self) -> Optional[str]:
        """
        Compute the selected digests for the selected file.
        No-op when no file is selected. Returns None on success, error message if
        the file cannot be read.
        """
        if self.file_path is None:
            return None
        selected = self.selected_algorithms()
        if not selected:
            log.info("No algorithms selected")
            return None
        try:
            data = self._read_bytes(self.file_path)
        except OSError as e:
            log.error("Reading %s failed: %s", self.file_path, e)
            return f"Could not read {self.file_path}: {e}"
        self._apply_results(compute_digests(data, selected, case=self.case))
        return None

    def _apply_results(self, results: Dict[AlgorithmId, DigestResult]) -> None:
        for algorithm, res in results.items():
            row = self.rows[algorithm]
            row.result = res.hex
            row.error = res.error

    def match_state(self, algorithm: AlgorithmId) -> MatchState:
        """Indicator for one row; NEUTRAL while the row has no result."""
        row = self.rows[AlgorithmId(algorithm)]
        if row.error is not None:
            return MatchState.NEUTRAL
        return compare_digest(row.result, row.expected, self.case)
