"""Turn raw text into word-count mappings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable

from sklearn.feature_extraction.text import CountVectorizer

DEFAULT_MIN_LENGTH = 2


class Tokenizer:
    """Word counter backed by scikit-learn's text analyzer."""

    def __init__(
        self,
        *,
        stop_words: str | list[str] | None = None,
        lowercase: bool = True,
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        if min_length < 1:
            raise ValueError("min_length must be at least 1")
        self._analyzer: Callable[[str], list[str]] = CountVectorizer(
            lowercase=lowercase,
            stop_words=stop_words,
            token_pattern=rf"(?u)\b\w{{{min_length},}}\b",
        ).build_analyzer()

    def tokenize(self, text: str) -> dict[str, int]:
        """Return each token of ``text`` mapped to its occurrence count."""

        if not text:
            return {}
        return dict(Counter(self._analyzer(text)))

    __call__ = tokenize


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: str) -> dict[str, int]:
    return _DEFAULT_TOKENIZER.tokenize(text)


__all__ = ["DEFAULT_MIN_LENGTH", "Tokenizer", "tokenize"]
