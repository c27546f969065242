"""Classifier implementations and infrastructure."""

from .accessors import Accessor, UnknownOperationError, resolve_accessor
from .base import Classifier, TokenizerLike
from .ledger import FrequencyLedger, UnknownCategoryError
from .naive_bayes import EmptyRegistryError, NaiveBayesClassifier

__all__ = [
    "Accessor",
    "Classifier",
    "EmptyRegistryError",
    "FrequencyLedger",
    "NaiveBayesClassifier",
    "TokenizerLike",
    "UnknownCategoryError",
    "UnknownOperationError",
    "resolve_accessor",
]
