"""Replay labelled text files from a corpus directory into a classifier."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .classifiers.base import Classifier
from .types import Category

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingResult:
    """Represents the outcome of replaying a single corpus file."""

    status: str
    category: Category
    path: Path
    reason: str | None = None


class CorpusTrainer:
    """Feeds ``<root>/<category>/<document>`` files to a classifier.

    Only categories already registered on the classifier are replayed unless
    an explicit list is passed; files are visited in sorted order so repeated
    runs produce identical ledgers.
    """

    def __init__(self, classifier: Classifier, *, encoding: str = "utf-8") -> None:
        self._classifier = classifier
        self._encoding = encoding

    def train_directory(
        self,
        root: Path,
        categories: Iterable[Category] | None = None,
    ) -> list[TrainingResult]:
        return self._replay(root, categories, untrain=False)

    def untrain_directory(
        self,
        root: Path,
        categories: Iterable[Category] | None = None,
    ) -> list[TrainingResult]:
        return self._replay(root, categories, untrain=True)

    def _replay(
        self,
        root: Path,
        categories: Iterable[Category] | None,
        *,
        untrain: bool,
    ) -> list[TrainingResult]:
        base = Path(root).expanduser()
        targets = list(categories) if categories is not None else self._known_categories()
        update = self._classifier.untrain if untrain else self._classifier.train
        status = "untrained" if untrain else "trained"

        results: list[TrainingResult] = []
        for category in targets:
            directory = base / category
            if not directory.is_dir():
                LOGGER.debug("Skipping missing corpus directory %s", directory)
                continue
            for candidate in sorted(directory.iterdir()):
                if not candidate.is_file():
                    continue
                try:
                    text = candidate.read_text(encoding=self._encoding)
                except (OSError, UnicodeDecodeError) as exc:
                    LOGGER.error("Failed to read corpus document %s: %s", candidate, exc)
                    results.append(
                        TrainingResult(
                            status="read_error",
                            category=category,
                            path=candidate,
                            reason=str(exc),
                        )
                    )
                    continue
                update(category, text)
                results.append(TrainingResult(status=status, category=category, path=candidate))

        LOGGER.info(
            "Replayed %d document(s) from %s for %d category name(s)",
            sum(1 for result in results if result.status == status),
            base,
            len(targets),
        )
        return results

    def _known_categories(self) -> list[Category]:
        ordered = getattr(self._classifier, "ordered_categories", None)
        if callable(ordered):
            return list(ordered())
        return sorted(self._classifier.list_categories())


__all__ = ["CorpusTrainer", "TrainingResult"]
