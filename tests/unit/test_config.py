from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from tallybayes.config import CONFIG_ENV_VAR, Config, ConfigError, load_config
from tallybayes.types import ScoringMode


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_path


def test_load_config_success(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        f"""
        categories:
          - in_china
          - not_in_china
        scoring: multinomial
        corpus_dir: {tmp_path}/corpus
        tokenizer:
          stop_words: english
          lowercase: false
          min_length: 3
        logging:
          level: debug
          file: {tmp_path}/logs/tallybayes.log
        """,
    )

    config = load_config(config_path)

    assert config.categories == ["in_china", "not_in_china"]
    assert config.scoring is ScoringMode.MULTINOMIAL
    assert config.corpus_dir == tmp_path / "corpus"
    assert config.tokenizer.stop_words == "english"
    assert config.tokenizer.lowercase is False
    assert config.tokenizer.min_length == 3
    assert config.logging.level == "debug"
    assert config.logging.file == tmp_path / "logs" / "tallybayes.log"


def test_load_config_defaults(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, ""))
    assert config == Config()
    assert config.scoring is ScoringMode.REFERENCE
    assert config.logging.file is None


def test_load_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        """
        categories: [spam, ham]
        """,
    )

    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))
    config = load_config()
    assert config.categories == ["spam", "ham"]


def test_duplicate_categories_are_dropped(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, "categories: [spam, spam, ham]\n"))
    assert config.categories == ["spam", "ham"]


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path / "missing.yaml")
    assert "Config file not found" in str(excinfo.value)


@pytest.mark.parametrize(
    "bad_content, expected_message",
    [
        ("- just\n- a list\n", "Configuration root must be a mapping"),
        ("categories: spam\n", "categories must be a list of names"),
        ("categories: [spam, 3]\n", "categories[2] must be a non-empty string"),
        ("scoring: laplace\n", "scoring must be one of: reference, multinomial"),
        ("tokenizer: [1]\n", "tokenizer must be a mapping"),
        ("tokenizer:\n  min_length: 0\n", "tokenizer.min_length must be a positive integer"),
        ("tokenizer:\n  stop_words: 12\n", "tokenizer.stop_words must be a string"),
        ("logging: verbose\n", "logging must be a mapping"),
        ("categories: [unclosed\n", "Invalid YAML"),
    ],
)
def test_load_config_validation_errors(
    bad_content: str,
    expected_message: str,
    tmp_path: Path,
) -> None:
    config_path = _write_config(tmp_path, bad_content)
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert expected_message in str(excinfo.value)


def test_missing_default_config_falls_back_when_allowed(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert load_config(default_if_missing=True) == Config()
    with pytest.raises(ConfigError):
        load_config()


def test_missing_explicit_config_never_falls_back(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml", default_if_missing=True)

    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
    with pytest.raises(ConfigError):
        load_config(default_if_missing=True)
