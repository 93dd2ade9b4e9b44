from pathlib import Path

import pytest

from multiwordle.datasets import read_words
from multiwordle.engine import WordBank
from multiwordle.errors import InvalidBank


def test_load_normalizes_and_dedupes():
    bank = WordBank.load(["STARE", " tears ", "", "Stare", "teary"])
    assert bank.secrets == ("stare", "tears", "teary")
    assert bank.size() == len(bank) == 3
    assert bank.word_length == 5
    assert bank.contains("TEARS") and "teary" in bank and "timed" not in bank
    assert bank.index("teary") == 2
    # iteration is restartable and in insertion order
    assert list(bank.iterate()) == list(bank) == ["stare", "tears", "teary"]


@pytest.mark.parametrize("words", [
    ["stare", "tea"],
    ["tea", "stare"],
    ["stare", "tears", "timers"],
])
def test_mixed_length_fails(words):
    with pytest.raises(InvalidBank):
        WordBank.load(words)


@pytest.mark.parametrize("words", [[], ["", "   "]])
def test_empty_fails(words):
    with pytest.raises(InvalidBank):
        WordBank.load(words)


def test_non_letters_fail():
    with pytest.raises(InvalidBank):
        WordBank.load(["st?re", "tears"])
    with pytest.raises(InvalidBank):
        WordBank.load("stare")  # a single string, not a list of words


def test_guess_only_words():
    bank = WordBank.load(["stare", "tears"], guesses=["CRANE", "stare", "crane"])
    assert bank.secrets == ("stare", "tears")
    assert bank.guesses == ("stare", "tears", "crane")
    assert bank.is_guessable("crane") and "crane" not in bank
    with pytest.raises(InvalidBank):
        WordBank.load(["stare"], guesses=["crane", "cranes"])


def test_read_words(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("stare tears\n# comment\nteary  # trailing\n\n", encoding="utf-8")
    assert read_words(p) == ["stare", "tears", "teary"]
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")
