"""Incremental word-frequency bookkeeping shared by the Bayes classifiers."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Iterable, Mapping

from ..types import Category, TokenCounts

LOGGER = logging.getLogger(__name__)


class UnknownCategoryError(KeyError):
    """Raised when an operation names a category that is not registered."""

    def __init__(self, category: Category) -> None:
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"No such category: {self.category}"


class FrequencyLedger:
    """Category registry plus per-category word and document counts.

    Word entries only exist while their count is positive. The global word
    total mirrors the sum of all word ledgers, except where ``untrain`` has
    cleared an entry (see :meth:`remove`).
    """

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        self._words: OrderedDict[Category, dict[str, int]] = OrderedDict()
        self._documents: dict[Category, int] = {}
        self._total_words = 0
        for category in categories:
            self.add_category(category)

    @property
    def total_words(self) -> int:
        return self._total_words

    def add_category(self, category: Category) -> Category:
        """Register ``category`` with an empty word ledger.

        Re-adding a known category discards its word counts; its document
        count is kept.
        """

        previous = self._words.get(category)
        if previous:
            LOGGER.debug("Resetting word ledger for existing category '%s'", category)
            self._total_words -= sum(previous.values())
        self._words[category] = {}
        return category

    def remove_category(self, category: Category) -> Category | None:
        try:
            words = self._words.pop(category)
        except KeyError:
            return None
        self._documents.pop(category, None)
        self._total_words -= sum(words.values())
        return category

    def categories(self) -> tuple[Category, ...]:
        return tuple(self._words)

    def __contains__(self, category: object) -> bool:
        return category in self._words

    def __len__(self) -> int:
        return len(self._words)

    def words(self, category: Category) -> Mapping[str, int]:
        return self._ledger(category)

    def document_count(self, category: Category) -> int:
        self._ledger(category)
        return self._documents.get(category, 0)

    def total_documents(self) -> int:
        return sum(self._documents.get(category, 0) for category in self._words)

    def vocabulary(self) -> set[str]:
        vocabulary: set[str] = set()
        for words in self._words.values():
            vocabulary.update(words)
        return vocabulary

    def add(self, category: Category, counts: TokenCounts) -> None:
        """Record one training document for ``category``."""

        ledger = self._ledger(category)
        self._documents[category] = self._documents.get(category, 0) + 1
        for word, count in counts.items():
            ledger[word] = ledger.get(word, 0) + count
            self._total_words += count

    def remove(self, category: Category, counts: TokenCounts) -> None:
        """Reverse one training document for ``category``.

        When a word's count drops to zero or below the entry is deleted and
        the global total is reduced by the stored count rather than by the
        requested amount. Words are skipped once the global total is negative.
        """

        ledger = self._ledger(category)
        self._documents[category] = self._documents.get(category, 0) - 1
        for word, count in counts.items():
            if self._total_words < 0:
                continue
            stored = ledger.get(word, 0)
            remaining = stored - count
            if remaining <= 0:
                ledger.pop(word, None)
                count = stored
            else:
                ledger[word] = remaining
            self._total_words -= count

    def _ledger(self, category: Category) -> dict[str, int]:
        try:
            return self._words[category]
        except KeyError:
            raise UnknownCategoryError(category) from None


__all__ = ["FrequencyLedger", "UnknownCategoryError"]
