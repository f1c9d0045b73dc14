"""Tests for client config: letter case, selected algorithms, last directory, geometry."""

import json
from pathlib import Path

from hashbox import config
from hashbox.digests import AlgorithmId, LetterCase


def test_config_dir_override(config_dir: Path) -> None:
    """HASHBOX_CONFIG_DIR decides where config.json lives."""
    assert config.get_config_path() == config_dir / "config.json"
    assert config.get_log_path() == config_dir / "hashbox.log"


def test_defaults_when_no_config(config_dir: Path) -> None:
    """Without a config file every getter returns its default."""
    assert config.get_letter_case() == LetterCase.LOWER
    assert config.get_selected_algorithms() == list(config.DEFAULT_ALGORITHMS)
    assert config.get_last_directory() is None
    assert config.get_window_geometry() is None


def test_corrupt_config_falls_back_to_defaults(config_dir: Path) -> None:
    """Unparseable JSON is treated as an empty config."""
    config.get_config_path().write_text("{not json", encoding="utf-8")
    assert config.get_letter_case() == LetterCase.LOWER
    assert config.get_selected_algorithms() == list(config.DEFAULT_ALGORITHMS)


def test_set_and_get_letter_case(config_dir: Path) -> None:
    """set_letter_case persists; get_letter_case returns it."""
    config.set_letter_case(LetterCase.UPPER)
    assert config.get_letter_case() == LetterCase.UPPER
    data = json.loads(config.get_config_path().read_text(encoding="utf-8"))
    assert data["letter_case"] == "upper"


def test_unknown_letter_case_is_lower(config_dir: Path) -> None:
    config.get_config_path().write_text(json.dumps({"letter_case": "mixed"}), encoding="utf-8")
    assert config.get_letter_case() == LetterCase.LOWER


def test_selected_algorithms_round_trip_drops_unknown(config_dir: Path) -> None:
    """Unknown algorithm names in the config are ignored."""
    config.set_selected_algorithms([AlgorithmId.SHA512, AlgorithmId.TIGER])
    assert config.get_selected_algorithms() == [AlgorithmId.SHA512, AlgorithmId.TIGER]
    config.get_config_path().write_text(
        json.dumps({"selected_algorithms": ["md5", "md6", "md5"]}), encoding="utf-8"
    )
    assert config.get_selected_algorithms() == [AlgorithmId.MD5]


def test_keys_are_kept_when_setting_another(config_dir: Path) -> None:
    """Writing one key does not drop the others."""
    config.set_letter_case(LetterCase.UPPER)
    config.set_window_geometry("900x700+10+20")
    assert config.get_letter_case() == LetterCase.UPPER
    assert config.get_window_geometry() == "900x700+10+20"


def test_last_directory_must_exist(config_dir: Path, tmp_path: Path) -> None:
    """get_last_directory ignores directories that were removed."""
    folder = tmp_path / "data"
    folder.mkdir()
    config.set_last_directory(folder)
    assert config.get_last_directory() == folder.resolve()
    folder.rmdir()
    assert config.get_last_directory() is None
