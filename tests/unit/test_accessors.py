from __future__ import annotations

import pytest

from tallybayes.classifiers.accessors import (
    Accessor,
    UnknownOperationError,
    resolve_accessor,
)
from tallybayes.classifiers.ledger import UnknownCategoryError


@pytest.mark.parametrize(
    "name, expected",
    [
        ("train_spam", Accessor(operation="train", category="spam")),
        ("untrain_spam", Accessor(operation="untrain", category="spam")),
        ("train_the_other", Accessor(operation="train", category="the_other")),
    ],
)
def test_resolve_accessor(name: str, expected: Accessor) -> None:
    assert resolve_accessor(name, {"spam", "the_other"}) == expected


def test_resolve_accessor_unknown_category() -> None:
    with pytest.raises(UnknownCategoryError) as excinfo:
        resolve_accessor("train_ham", {"spam"})
    assert excinfo.value.category == "ham"


@pytest.mark.parametrize("name", ["classify_spam", "train", "train_", "pretrain_spam"])
def test_resolve_accessor_unknown_operation(name: str) -> None:
    with pytest.raises(UnknownOperationError):
        resolve_accessor(name, {"spam"})


def test_unknown_operation_is_attribute_error() -> None:
    assert issubclass(UnknownOperationError, AttributeError)
