from __future__ import annotations

from pathlib import Path

import pytest

CORPUS: dict[str, list[str]] = {
    "sports": [
        "The team won the match after a late goal in the final minute.",
        "Coach praised the striker for scoring twice in the league game.",
        "Fans cheered as the goalkeeper saved a penalty in the cup final.",
    ],
    "finance": [
        "Shares fell as the central bank raised interest rates again.",
        "The market rallied after strong quarterly earnings from banks.",
        "Investors moved money into bonds as inflation fears grew.",
    ],
    "cooking": [
        "Simmer the tomato sauce with garlic and fresh basil.",
        "Bake the bread until the crust is golden and crisp.",
        "Whisk eggs with sugar before folding in the flour.",
    ],
}


def write_corpus(root: Path, corpus: dict[str, list[str]] = CORPUS) -> Path:
    """Write each category's documents into ``root/<category>/NNN.txt``."""

    for category, documents in corpus.items():
        directory = root / category
        directory.mkdir(parents=True, exist_ok=True)
        for idx, text in enumerate(documents):
            (directory / f"{idx:03d}.txt").write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    return write_corpus(tmp_path / "corpus")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically mark tests in this package as integration."""

    package_root = Path(__file__).resolve().parent
    integration_mark = pytest.mark.integration
    for item in items:
        try:
            path = Path(item.fspath).resolve()
        except OSError:
            continue
        if package_root in path.parents:
            item.add_marker(integration_mark)
