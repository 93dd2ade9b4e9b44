from collections import Counter
from itertools import product

import numpy as np
import pytest

from multiwordle.engine import (
    Tile, WordBank, VerdictTable, score, encode_verdict, decode_verdict, all_correct,
    is_all_correct, filter_candidates, validate_guess, is_hard_mode_valid,
)
from multiwordle.session.io import format_verdict, parse_verdict

WORDS = ["belle", "level", "lemon", "cools", "scoop", "crane", "raise", "stare", "eerie",
         "geese", "added", "llama", "tears", "teary", "timer", "timed"]


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("belle", "level", "-#^^^"),
    ("level", "level", "#####"),
    ("lemon", "level", "##---"),
    ("cools", "scoop", "^^#-^"),
    ("scoop", "scoop", "#####"),
    ("crane", "crane", "#####"),
    ("raise", "crane", "^^--#"),
    ("stare", "crane", "--#^#"),
    ("tears", "teary", "####-"),
    ("tears", "timed", "#^---"),
])
def test_score_n5_golden(guess, secret, expected):
    assert format_verdict(score(guess, secret)) == expected


# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("settle", "letter", "-###^^"),
    ("little", "letter", "#-##-^"),
    ("planet", "palate", "#^^-^^"),
    ("kitten", "tinket", "^#^^#^"),
])
def test_score_n6_samples(guess, secret, expected):
    assert format_verdict(score(guess, secret)) == expected


def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cranes")


def test_score_letter_credit_bounds():
    for guess, secret in product(WORDS, WORDS):
        v = score(guess, secret)
        # Correct exactly where the letters agree
        for i, t in enumerate(v):
            assert (t is Tile.CORRECT) == (guess[i] == secret[i])
        # Credited tiles per letter never exceed min(count in guess, count in secret)
        credited = Counter(ch for ch, t in zip(guess, v) if t is not Tile.ABSENT)
        g, s = Counter(guess), Counter(secret)
        for ch, n in credited.items():
            assert n <= min(g[ch], s[ch]), (guess, secret)


def test_verdict_codes():
    v = score("belle", "level")
    code = encode_verdict(v)
    assert decode_verdict(code, 5) == v
    assert encode_verdict(all_correct(5)) == 3 ** 5 - 1
    assert is_all_correct(all_correct(5))
    assert not is_all_correct(v)
    with pytest.raises(ValueError):
        decode_verdict(3 ** 5, 5)


def test_parse_verdict_symbols():
    assert parse_verdict("#^-") == (Tile.CORRECT, Tile.PRESENT, Tile.ABSENT)


def test_verdict_table_matches_score():
    bank = WordBank.load(WORDS)
    table = VerdictTable(bank)
    for g in WORDS:
        row = table.row(g)
        for i, s in enumerate(bank.secrets):
            assert row[i] == encode_verdict(score(g, s)), (g, s)
    assert table.cached_rows() == len(WORDS)


def test_verdict_rows_use_small_codes():
    # 3**5 codes fit a byte; six letters need two
    five = VerdictTable(WordBank.load(WORDS))
    assert five.row("tears").dtype == np.uint8
    assert five.row("tears").max() <= 3 ** 5 - 1
    six = VerdictTable(WordBank.load(["letter", "settle", "little"]))
    assert six.row("letter").dtype == np.uint16
    assert six.row("letter")[0] == 3 ** 6 - 1


def test_verdict_table_partition_sizes():
    bank = WordBank.load(["stare", "tears", "teary", "timer", "timed"])
    table = VerdictTable(bank)
    sizes = table.partition_sizes("timed", np.arange(5))
    assert sorted(sizes.tolist()) == [1, 1, 1, 2]


def test_filter_candidates_n5_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", parse_verdict("^^--#"))]
    cand = filter_candidates(words, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_n6_basic():
    words = ["letter", "settle", "little", "tattle", "better"]
    history = [("settle", parse_verdict("-###^^"))]
    cand = filter_candidates(words, history)
    assert "letter" in cand and "better" not in cand


def test_validate_guess_n5():
    bank = WordBank.load(["crane", "raise", "stare"], guesses=["adieu"])
    assert validate_guess("CRANE", bank) is True
    assert validate_guess("adieu", bank) is True
    assert validate_guess("cranes", bank) is False
    assert validate_guess("???", bank) is False
    assert validate_guess("trace", bank) is False
    assert validate_guess(None, bank) is False


def test_hard_mode_validity():
    # timed vs secret teary: t fixed in place, e must be reused
    prev = score("timed", "teary")
    assert format_verdict(prev) == "#--^-"
    assert is_hard_mode_valid("timed", prev, "tears")
    assert not is_hard_mode_valid("timed", prev, "stare")   # t moved
    assert not is_hard_mode_valid("timed", prev, "tramp")   # no e


def test_hard_mode_respects_multiplicity():
    prev = score("eerie", "geese")
    assert format_verdict(prev) == "^#--#"
    # three e's credited: any follow-up needs three e's, two of them pinned
    assert is_hard_mode_valid("eerie", prev, "geese")
    assert not is_hard_mode_valid("eerie", prev, "lease")
    assert not is_hard_mode_valid("eerie", prev, "crane")
