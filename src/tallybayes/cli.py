"""tallybayes command-line interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from . import __version__
from .classifiers import EmptyRegistryError, NaiveBayesClassifier
from .config import Config, ConfigError, load_config, resolve_config_path
from .logging import configure_logging
from .tokenizer import Tokenizer
from .trainer import CorpusTrainer

app = typer.Typer(help="Naive Bayes text classification utilities.")
LOGGER = logging.getLogger(__name__)

CorpusOption = Annotated[
    Path | None,
    typer.Option(
        "--corpus",
        help="Directory holding one sub-directory of text files per category.",
    ),
]


@dataclass
class CLIState:
    """Stores shared CLI options."""

    config_path: Path | None


@app.callback()
def _tallybayes(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "-c",
            "--config",
            help="Path to config (env TALLYBAYES_CONFIG or ~/.config/tallybayes/config.yaml).",
        ),
    ] = None,
) -> None:
    """Capture global CLI options."""

    resolved = config.expanduser() if config else None
    ctx.obj = CLIState(config_path=resolved)


@app.command()
def classify(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(..., help="Text to classify.")],
    corpus: CorpusOption = None,
) -> None:
    """Train on the corpus and print the best matching category."""

    classifier = _trained_classifier(_state(ctx), corpus)
    try:
        result = classifier.predict(text)
    except EmptyRegistryError as exc:
        typer.secho(f"Cannot classify: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
    typer.echo(f"Category: {result.category}")
    _echo_scores(result.scores)


@app.command()
def scores(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(..., help="Text to score.")],
    corpus: CorpusOption = None,
) -> None:
    """Print the score of the text for every category."""

    classifier = _trained_classifier(_state(ctx), corpus)
    _echo_scores(classifier.score_all(text))


@app.command()
def categories(
    ctx: typer.Context,
    corpus: CorpusOption = None,
) -> None:
    """List categories with their trained document and word counts."""

    classifier = _trained_classifier(_state(ctx), corpus)
    ledger = classifier.ledger
    typer.echo(f"tallybayes {__version__} ({classifier.scoring.value} scoring)")
    for name in classifier.ordered_categories():
        words = sum(ledger.words(name).values())
        typer.echo(f"  - {name}: documents={ledger.document_count(name)} words={words}")
    typer.echo(f"Total words: {classifier.total_words}")


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state missing from context.")
    return state


def _trained_classifier(state: CLIState, corpus: Path | None) -> NaiveBayesClassifier:
    config = _load_config(state.config_path)
    try:
        configure_logging(config.logging)
    except ConfigError as exc:
        _config_failure(exc)

    corpus_dir = corpus.expanduser() if corpus else config.corpus_dir
    if corpus_dir is None or not corpus_dir.is_dir():
        typer.secho(f"Corpus directory not found: {corpus_dir}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    names = config.categories or _discover_categories(corpus_dir)
    classifier = NaiveBayesClassifier(
        names,
        tokenizer=Tokenizer(
            stop_words=config.tokenizer.stop_words,
            lowercase=config.tokenizer.lowercase,
            min_length=config.tokenizer.min_length,
        ),
        scoring=config.scoring,
    )
    CorpusTrainer(classifier).train_directory(corpus_dir)
    return classifier


def _discover_categories(corpus_dir: Path) -> list[str]:
    return sorted(entry.name for entry in corpus_dir.iterdir() if entry.is_dir())


def _echo_scores(values: dict[str, float]) -> None:
    typer.echo("Scores:")
    for name, score in values.items():
        typer.echo(f"  {name}: {score:.6f}")


def _load_config(path: Path | None) -> Config:
    try:
        return load_config(path, default_if_missing=True)
    except ConfigError as exc:
        LOGGER.debug("Config lookup at %s failed", resolve_config_path(path))
        _config_failure(exc)


def _config_failure(exc: ConfigError) -> NoReturn:
    typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2) from exc


def main() -> None:  # pragma: no cover - delegated to Typer
    app()


__all__ = ["app", "main"]
