import math
from collections import Counter

import pytest

from multiwordle import load_bank
from multiwordle.advisors import (
    BaseAdvisor, LookaheadSearch, create_advisor, get_advisor_ids, plan_board, recommend,
)
from multiwordle.errors import EmptyPool, InconsistentVerdict

BANK = ["STARE", "TEARS", "TEARY", "TIMER", "TIMED"]


def words(recs):
    return [r.word for r in recs]


def test_registry():
    assert get_advisor_ids() == [
        "entropy", "expected_left", "lookahead", "verdict_groups", "worst_case"]
    with pytest.raises(ValueError):
        create_advisor("nope")


def test_expected_left_fresh_board():
    s = load_bank(BANK, 1)
    recs = recommend(s)
    # stare/tears/teary split all five apart; timed and timer leave a pair
    assert words(recs) == ["stare", "tears", "teary", "timed", "timer"]
    assert [r.score for r in recs] == pytest.approx([1.0, 1.0, 1.0, 1.4, 1.4])


def test_pool_override_and_limit():
    s = load_bank(BANK, 1)
    recs = recommend(s, ["TIMED", "tears", "tears"])
    assert recs == [("tears", pytest.approx(1.0)), ("timed", pytest.approx(1.4))]
    assert words(recommend(s, ["timed", "tears"], limit=1)) == ["tears"]


def test_other_advisors_agree_on_order():
    s = load_bank(BANK, 1)
    worst = recommend(s, advisor="worst_case")
    assert [r.score for r in worst] == [1, 1, 1, 2, 2]
    ent = recommend(s, advisor="entropy")
    assert words(ent)[:3] == ["stare", "tears", "teary"]
    assert ent[0].score < ent[-1].score < 0


def test_combine_sum_vs_max():
    s = load_bank(BANK, 2)
    assert recommend(s, ["tears"])[0].score == pytest.approx(2.0)
    assert recommend(s, ["tears"], combine="max")[0].score == pytest.approx(1.0)
    with pytest.raises(ValueError):
        recommend(s, combine="mean")


def test_closing_guesses_win_ties():
    s = load_bank(["abcde", "abcdf"], 1, guesses=["aaaaf"])
    recs = recommend(s)
    # all three split the pair, but only the candidates can win outright
    assert [r.score for r in recs] == pytest.approx([1.0, 1.0, 1.0])
    assert words(recs) == ["abcde", "abcdf", "aaaaf"]


def test_same_state_same_answer():
    a = load_bank(BANK, 2)
    b = load_bank(BANK, 2)
    for s in (a, b):
        s.apply_verdicts("timed", ["#--^-", "####-"])
    assert recommend(a) == recommend(b)


def test_no_active_boards():
    s = load_bank(BANK, 2, secrets=["teary", "timed"])
    s.submit_guess("tears")
    assert recommend(s) == []
    # a bad pool is still reported
    with pytest.raises(EmptyPool):
        recommend(s, ["crane"])


def test_empty_pool():
    s = load_bank(BANK, 1)
    with pytest.raises(EmptyPool):
        recommend(s, [])
    with pytest.raises(EmptyPool):
        recommend(s, ["crane", "tea"])


def test_contradicted_board_is_ignored():
    s = load_bank(BANK, 2)
    s.apply_verdicts("timed", ["####^", "#--^-"])
    assert s.active_targets() == [1]

    one = load_bank(BANK, 1)
    one.apply_verdicts("timed", ["#--^-"])
    assert recommend(s) == recommend(one)


def test_pool_policies():
    s = load_bank(BANK, 1)
    s.apply_verdicts("timed", ["#--^-"])     # tears or teary

    assert words(recommend(s, policy="candidates")) == ["tears", "teary"]
    assert words(recommend(s, policy="auto")) == ["tears", "teary"]
    assert words(recommend(s, policy="intersection")) == ["tears", "teary"]

    recs = recommend(s, policy="all")
    assert words(recs) == ["tears", "teary", "stare", "timed", "timer"]
    assert [r.score for r in recs] == pytest.approx([1.0, 1.0, 1.0, 2.0, 2.0])

    with pytest.raises(ValueError):
        recommend(s, policy="everything")


def test_cap_keeps_closing_words():
    s = load_bank(BANK, 1)
    s.apply_verdicts("timed", ["#--^-"])
    # stare covers the most letters; tears/teary ride along as closers
    assert words(recommend(s, policy="all", cap=1)) == ["tears", "teary", "stare"]


def test_hard_mode_pool():
    s = load_bank(BANK, 1, secrets=["teary"], hard_mode=True)
    s.submit_guess("timed")
    recs = recommend(s)
    assert "stare" not in words(recs)          # moves the pinned t
    assert words(recs)[:2] == ["tears", "teary"]
    with pytest.raises(EmptyPool):
        recommend(s, ["stare"])


class FixedScores(BaseAdvisor):
    """Hands out preset per-board scores, board by board, for each guess."""

    id = "fixed"

    def __init__(self, scores):
        self.scores = scores
        self.calls = Counter()

    def score_board(self, table, guess, candidates, n):
        k = self.calls[guess]
        self.calls[guess] += 1
        return self.scores.get(guess, [1.0, 1.0, 1.0])[k]


def test_equal_scores_tie_whatever_the_summation_order():
    # 0.1 + 0.2 + 0.3 and 0.3 + 0.2 + 0.1 differ in the last bit
    adv = FixedScores({"stare": [0.1, 0.2, 0.3], "tears": [0.3, 0.2, 0.1]})
    s = load_bank(BANK, 3)
    recs = recommend(s, ["tears", "stare"], advisor=adv)
    assert words(recs) == ["stare", "tears"]
    assert [r.score for r in recs] == pytest.approx([0.6, 0.6])


def test_verdict_groups():
    s = load_bank(BANK, 1)
    recs = recommend(s, advisor="verdict_groups")
    # five groups beat four; the largest group breaks ties
    assert words(recs) == ["stare", "tears", "teary", "timed", "timer"]
    assert recs[0].score == pytest.approx(-5 + 1 / 6)
    assert recs[-1].score == pytest.approx(-4 + 2 / 6)


def test_lookahead_search_optimal_total():
    s = load_bank(BANK, 1)
    search = LookaheadSearch(s.table, s.bank.guesses)
    guess, perf = search.best_guess(range(5), 6)
    # one word found at once, the other four on the second guess
    assert (guess, perf.total_attempts, perf.missed) == ("stare", 9, False)
    # timed leaves tears/teary together: 5 + 1 + 1 + 3
    assert search.evaluate("timed", range(5), 6).total_attempts == 10
    assert search.cached_plans() == 1
    assert search.best_guess(range(5), 6) == (guess, perf)


def test_lookahead_advisor():
    s = load_bank(BANK, 1)
    adv = create_advisor("lookahead")
    recs = recommend(s, advisor=adv)
    assert words(recs) == ["stare", "tears", "teary", "timed", "timer"]
    assert [r.score for r in recs] == pytest.approx([1.8, 1.8, 1.8, 2.0, 2.0])
    search = adv.search
    assert recommend(s, advisor=adv) == recs and adv.search is search


def test_lookahead_respects_turn_budget():
    s = load_bank(BANK, 1, max_turns=2)
    recs = recommend(s, advisor="lookahead")
    assert words(recs)[:3] == ["stare", "tears", "teary"]
    assert [r.score for r in recs[:3]] == pytest.approx([1.8] * 3)
    # timed and timer leave a pair that one more guess cannot both cover
    assert words(recs)[3:] == ["timed", "timer"]
    assert all(math.isinf(r.score) for r in recs[3:])


def test_lookahead_hard_mode():
    s = load_bank(BANK, 1, secrets=["teary"], hard_mode=True)
    s.submit_guess("timed")
    recs = recommend(s, advisor="lookahead")
    assert words(recs) == ["tears", "teary", "timed", "timer"]
    assert [r.score for r in recs] == pytest.approx([1.5, 1.5, 2.5, 2.5])


def test_plan_board():
    s = load_bank(BANK, 1)
    p = plan_board(s, 0)
    assert (p.guess, p.total_attempts, p.missed) == ("stare", 9, False)
    assert p.expected_attempts == pytest.approx(1.8)

    s.apply_verdicts("timed", ["#--^-"])          # tears or teary, 5 turns left
    p = plan_board(s, 0)
    assert (p.guess, p.total_attempts, p.missed) == ("tears", 3, False)
    assert p.expected_attempts == pytest.approx(1.5)

    tight = load_bank(BANK, 1, max_turns=2)
    tight.apply_verdicts("timed", ["#--^-"])      # one turn for two words
    assert plan_board(tight, 0).missed

    bad = load_bank(BANK, 2)
    bad.apply_verdicts("timed", ["####^", "#--^-"])
    with pytest.raises(InconsistentVerdict):
        plan_board(bad, 0)
