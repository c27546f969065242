"""Classifier protocol definitions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from ..types import Category, TokenCounts


@runtime_checkable
class Classifier(Protocol):
    """Common interface for incrementally trained text classifiers."""

    def train(self, category: Category, text: str | TokenCounts) -> None:
        """Add a single document to ``category``."""

    def untrain(self, category: Category, text: str | TokenCounts) -> None:
        """Reverse a previous ``train`` call with the same arguments."""

    def score_all(self, text: str | TokenCounts) -> Mapping[Category, float]:
        """Return the score of ``text`` for every registered category."""

    def classify(self, text: str | TokenCounts) -> Category:
        """Return the best scoring category for ``text``."""

    def list_categories(self) -> set[Category]:
        """Return the registered categories."""


@runtime_checkable
class TokenizerLike(Protocol):
    """Anything that can turn text into token counts."""

    def tokenize(self, text: str) -> TokenCounts:
        """Return token counts for ``text``."""


__all__ = ["Classifier", "TokenizerLike"]
