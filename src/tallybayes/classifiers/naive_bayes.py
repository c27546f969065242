"""Implementation of the incremental multinomial Naive Bayes classifier."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

import numpy as np

from ..tokenizer import Tokenizer
from ..types import Category, Classification, ScoringMode, TokenCounts
from .accessors import resolve_accessor
from .base import TokenizerLike
from .ledger import FrequencyLedger

LOGGER = logging.getLogger(__name__)


class EmptyRegistryError(LookupError):
    """Raised when classifying without any registered category."""


class NaiveBayesClassifier:
    """Multinomial Naive Bayes over word counts with reversible training.

    Scores are log-likelihoods, so the category closest to zero wins. Degenerate
    inputs (a category without documents or vocabulary) produce non-finite
    scores instead of exceptions.
    """

    def __init__(
        self,
        categories: Iterable[Category] = (),
        *,
        tokenizer: TokenizerLike | None = None,
        scoring: ScoringMode | str = ScoringMode.REFERENCE,
    ) -> None:
        self._ledger = FrequencyLedger(categories)
        self._tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self._scoring = ScoringMode(scoring)

    @property
    def ledger(self) -> FrequencyLedger:
        return self._ledger

    @property
    def scoring(self) -> ScoringMode:
        return self._scoring

    @property
    def total_words(self) -> int:
        return self._ledger.total_words

    def add_category(self, category: Category) -> Category:
        return self._ledger.add_category(category)

    append_category = add_category

    def remove_category(self, category: Category) -> Category | None:
        return self._ledger.remove_category(category)

    def list_categories(self) -> set[Category]:
        return set(self._ledger.categories())

    def ordered_categories(self) -> tuple[Category, ...]:
        return self._ledger.categories()

    def train(self, category: Category, text: str | TokenCounts) -> None:
        counts = self._counts(text)
        self._ledger.add(category, counts)
        LOGGER.debug("Trained '%s' on %d distinct token(s)", category, len(counts))

    def untrain(self, category: Category, text: str | TokenCounts) -> None:
        counts = self._counts(text)
        self._ledger.remove(category, counts)
        LOGGER.debug("Untrained '%s' on %d distinct token(s)", category, len(counts))

    def invoke(self, name: str, *texts: str | TokenCounts) -> None:
        """Run a ``train_<category>``/``untrain_<category>`` shortcut."""

        accessor = resolve_accessor(name, self._ledger)
        update = self.train if accessor.operation == "train" else self.untrain
        for text in texts:
            update(accessor.category, text)

    def score_all(self, text: str | TokenCounts) -> dict[Category, float]:
        counts = self._counts(text)
        categories = self._ledger.categories()
        total_documents = np.float64(self._ledger.total_documents())
        vocabulary_size = 0
        if self._scoring is ScoringMode.MULTINOMIAL:
            vocabulary = self._ledger.vocabulary()
            vocabulary_size = len(vocabulary)
            counts = {word: count for word, count in counts.items() if word in vocabulary}

        scores: dict[Category, float] = {}
        with np.errstate(divide="ignore", invalid="ignore"):
            for category in categories:
                words = self._ledger.words(category)
                if self._scoring is ScoringMode.MULTINOMIAL:
                    likelihood = _smoothed_likelihood(words, counts, vocabulary_size)
                else:
                    likelihood = _likelihood(words, counts)
                documents = np.float64(self._ledger.document_count(category))
                prior = np.log(documents / total_documents)
                scores[category] = float(likelihood + prior)
        return scores

    def classify(self, text: str | TokenCounts) -> Category:
        return self.predict(text).category

    def predict(self, text: str | TokenCounts) -> Classification:
        """Return the winning category together with every score.

        Ties go to the category registered first; NaN scores never win unless
        every score is NaN.
        """

        scores = self.score_all(text)
        if not scores:
            raise EmptyRegistryError("No categories registered.")
        labels = list(scores)
        values = np.fromiter(scores.values(), dtype=np.float64, count=len(labels))
        best_index = 0 if np.isnan(values).all() else int(np.nanargmax(values))
        return Classification(category=labels[best_index], scores=scores)

    def _counts(self, text: str | TokenCounts) -> TokenCounts:
        if isinstance(text, Mapping):
            return _validated_counts(text)
        return self._tokenizer.tokenize(text)


def _validated_counts(counts: TokenCounts) -> TokenCounts:
    for word, count in counts.items():
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError(f"Token count for {word!r} must be a positive integer, got {count!r}")
    return counts


def _likelihood(words: Mapping[str, int], counts: TokenCounts) -> float:
    present = [word for word in counts if word in words]
    if not present:
        return 0.0
    frequencies = np.fromiter((words[word] for word in present), dtype=np.float64)
    total = np.float64(sum(words.values()))
    return float(np.log(frequencies / total).sum())


def _smoothed_likelihood(
    words: Mapping[str, int],
    counts: TokenCounts,
    vocabulary_size: int,
) -> float:
    if not counts:
        return 0.0
    occurrences = np.fromiter(counts.values(), dtype=np.float64)
    frequencies = np.fromiter((words.get(word, 0) for word in counts), dtype=np.float64)
    denominator = np.float64(sum(words.values()) + vocabulary_size)
    return float((occurrences * np.log((frequencies + 1.0) / denominator)).sum())


__all__ = ["EmptyRegistryError", "NaiveBayesClassifier"]
