"""Name-based ``train_<category>`` / ``untrain_<category>`` shortcuts."""

from __future__ import annotations

import re
from collections.abc import Container
from dataclasses import dataclass

from ..types import Category
from .ledger import UnknownCategoryError

ACCESSOR_PATTERN = re.compile(r"^(?P<operation>(?:un)?train)_(?P<category>\w+)$")


class UnknownOperationError(AttributeError):
    """Raised for accessor names that are not ``train_``/``untrain_`` shaped."""


@dataclass(frozen=True)
class Accessor:
    """A resolved shortcut: which update to run against which category."""

    operation: str
    category: Category


def resolve_accessor(name: str, categories: Container[Category]) -> Accessor:
    """Resolve ``name`` against the currently registered ``categories``."""

    match = ACCESSOR_PATTERN.match(name)
    if match is None:
        raise UnknownOperationError(f"No such operation: {name}")
    category = match.group("category")
    if category not in categories:
        raise UnknownCategoryError(category)
    return Accessor(operation=match.group("operation"), category=category)


__all__ = ["ACCESSOR_PATTERN", "Accessor", "UnknownOperationError", "resolve_accessor"]
