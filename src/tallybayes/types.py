"""Core immutable data structures used throughout tallybayes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

Category = str
TokenCounts = Mapping[str, int]


class ScoringMode(str, Enum):
    """How per-category scores are computed."""

    REFERENCE = "reference"
    MULTINOMIAL = "multinomial"


@dataclass(frozen=True)
class Classification:
    """Classification result."""

    category: Category
    scores: Mapping[Category, float]


__all__ = [
    "Category",
    "Classification",
    "ScoringMode",
    "TokenCounts",
]
