"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .tokenizer import DEFAULT_MIN_LENGTH
from .types import Category, ScoringMode

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TALLYBAYES_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/tallybayes/config.yaml")
DEFAULT_LOG_LEVEL = "info"


class ConfigError(ValueError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class LoggingConfig:
    """Logging-related configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file: Path | None = None


@dataclass(frozen=True)
class TokenizerConfig:
    """Options forwarded to :class:`tallybayes.tokenizer.Tokenizer`."""

    stop_words: str | list[str] | None = None
    lowercase: bool = True
    min_length: int = DEFAULT_MIN_LENGTH


@dataclass(frozen=True)
class Config:
    """Fully parsed configuration."""

    categories: list[Category] = field(default_factory=list)
    scoring: ScoringMode = ScoringMode.REFERENCE
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    corpus_dir: Path | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | str | None = None, *, default_if_missing: bool = False) -> Config:
    """Load and validate configuration from YAML.

    With ``default_if_missing`` an absent file at the default location yields
    the built-in defaults; explicit paths and $TALLYBAYES_CONFIG must exist.
    """

    config_path = resolve_config_path(path)
    if not config_path.exists():
        if default_if_missing and not path and not os.environ.get(CONFIG_ENV_VAR):
            LOGGER.debug("No config at %s; using defaults.", config_path)
            return Config()
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return parse_config(raw)


def resolve_config_path(explicit: Path | str | None) -> Path:
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def parse_config(raw: dict[str, Any]) -> Config:
    corpus_dir = raw.get("corpus_dir")
    return Config(
        categories=_parse_categories(raw.get("categories")),
        scoring=_parse_scoring(raw.get("scoring")),
        tokenizer=_parse_tokenizer(raw.get("tokenizer")),
        corpus_dir=Path(corpus_dir).expanduser() if corpus_dir else None,
        logging=_parse_logging(raw.get("logging")),
    )


def _parse_categories(value: Any) -> list[Category]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("categories must be a list of names.")

    categories: list[Category] = []
    for idx, entry in enumerate(value, start=1):
        if not isinstance(entry, str) or not entry.strip():
            raise ConfigError(f"categories[{idx}] must be a non-empty string.")
        name = entry.strip()
        if name in categories:
            LOGGER.warning("Category '%s' listed more than once; ignoring duplicate.", name)
            continue
        categories.append(name)
    return categories


def _parse_scoring(value: Any) -> ScoringMode:
    if value is None:
        return ScoringMode.REFERENCE
    try:
        return ScoringMode(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in ScoringMode)
        raise ConfigError(f"scoring must be one of: {choices}.") from exc


def _parse_tokenizer(value: Any) -> TokenizerConfig:
    if value is None:
        return TokenizerConfig()
    if not isinstance(value, dict):
        raise ConfigError("tokenizer must be a mapping.")
    stop_words = value.get("stop_words")
    if stop_words is not None and not isinstance(stop_words, (str, list)):
        raise ConfigError("tokenizer.stop_words must be a string or a list of words.")
    min_length = value.get("min_length", DEFAULT_MIN_LENGTH)
    if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length < 1:
        raise ConfigError("tokenizer.min_length must be a positive integer.")
    return TokenizerConfig(
        stop_words=stop_words,
        lowercase=bool(value.get("lowercase", True)),
        min_length=min_length,
    )


def _parse_logging(value: Any) -> LoggingConfig:
    if value is None:
        return LoggingConfig()
    if not isinstance(value, dict):
        raise ConfigError("logging must be a mapping.")
    level = str(value.get("level", DEFAULT_LOG_LEVEL)).lower()
    file_value = value.get("file")
    return LoggingConfig(
        level=level,
        file=Path(file_value).expanduser() if file_value else None,
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "ConfigError",
    "LoggingConfig",
    "TokenizerConfig",
    "load_config",
    "parse_config",
    "resolve_config_path",
]
