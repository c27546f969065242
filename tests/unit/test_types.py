from dataclasses import FrozenInstanceError

import pytest

from tallybayes import types as tallybayes_types


def test_classification_is_immutable() -> None:
    result = tallybayes_types.Classification(category="spam", scores={"spam": -1.5})
    assert result.scores["spam"] == pytest.approx(-1.5)

    with pytest.raises(FrozenInstanceError):
        result.category = "ham"  # type: ignore[misc]


def test_scoring_mode_values() -> None:
    assert tallybayes_types.ScoringMode("reference") is tallybayes_types.ScoringMode.REFERENCE
    assert tallybayes_types.ScoringMode.MULTINOMIAL == "multinomial"
