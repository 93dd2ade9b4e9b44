"""
Session: one multi-board game.

- load_bank:  build a WordBank and `num_targets` TargetTrackers over it.
- Session.submit_guess:   score one guess against every active board's secret
                          and filter each board with the result.
- Session.apply_verdicts: same, but the caller supplies the verdicts.
- Session.state:          read-only per-board snapshot.

Every board sees the same guess in a round; there is no way to send different
guesses to different boards. A board is active until it is solved (one
candidate left) or contradicted (none left); inactive boards are skipped.

A Session is a plain object. Starting a new game means calling load_bank
again; nothing is shared between sessions except what the caller passes in.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, NamedTuple, Sequence, Tuple

from multiwordle.advisors import recommend
from multiwordle.engine import TargetTracker, VerdictTable, WordBank, score
from multiwordle.engine.bank import normalize
from multiwordle.engine.scoring import Verdict
from multiwordle.engine.validation import hard_mode_violation, validate_guess
from multiwordle.errors import (
    InconsistentVerdict,
    InvalidGuess,
    InvalidSecrets,
    InvalidTargetCount,
    InvalidVerdict,
)
from .io import as_verdict

log = logging.getLogger(__name__)

# Multi-board variants allow one guess per board plus this many
EXTRA_TURNS = 5


def default_max_turns(num_targets: int) -> int:
    """Turn budget for `num_targets` boards: 6 for one, 9 for four, 13 for eight."""
    return num_targets + EXTRA_TURNS


def _check_target_count(num_targets: int) -> None:
    if isinstance(num_targets, bool) or not isinstance(num_targets, int) or num_targets <= 0:
        raise InvalidTargetCount(f"num_targets must be a positive integer; got {num_targets!r}")


class TargetState(NamedTuple):
    index: int
    candidate_count: int
    solved: bool
    contradicted: bool
    history_length: int
    won: bool


def load_bank(
        words: Iterable[str],
        num_targets: int,
        *,
        guesses: Iterable[str] = (),
        secrets: Sequence[str] | None = None,
        hard_mode: bool = False,
        max_turns: int | None = None,
) -> "Session":
    """
    Start a new game.

    Args:
        words:       possible secrets (raw strings; normalised by the bank)
        num_targets: number of simultaneous boards, must be >= 1
        guesses:     extra words that may be guessed but are never secrets
        secrets:     one secret per board, if the engine should score guesses
                     itself (see Session.submit_guess)
        hard_mode:   reject guesses that ignore revealed hints
        max_turns:   turn budget (default num_targets + 5); only the lookahead
                     advisor plans against it, guesses past it are still accepted

    Raises:
        InvalidTargetCount, InvalidBank, InvalidSecrets. No session is
        returned on failure.
    """
    _check_target_count(num_targets)
    bank = WordBank.load(words, guesses)
    return Session(bank, num_targets, secrets=secrets, hard_mode=hard_mode, max_turns=max_turns)


class Session:
    def __init__(self, bank: WordBank, num_targets: int, *,
                 secrets: Sequence[str] | None = None, hard_mode: bool = False,
                 table: VerdictTable | None = None, max_turns: int | None = None):
        _check_target_count(num_targets)
        if max_turns is None:
            max_turns = default_max_turns(num_targets)
        if max_turns < 1:
            raise ValueError(f"max_turns must be at least 1; got {max_turns}")

        self.bank = bank
        self.num_targets = num_targets
        self.hard_mode = hard_mode
        self.max_turns = max_turns
        if table is not None and table.bank is not bank:
            raise ValueError("verdict table was built for a different bank")
        # The table only depends on the bank, so games over one bank may share it.
        self.table = table if table is not None else VerdictTable(bank)
        self.trackers: List[TargetTracker] = [
            TargetTracker(bank, self.table) for _ in range(num_targets)
        ]
        self._guesses: List[str] = []
        # board -> round (0-based) in which a board solved by deduction was played
        self._won_round: Dict[int, int] = {}
        self._secrets = self._check_secrets(secrets) if secrets is not None else None

        log.debug(f"New session: {num_targets} board(s), {len(bank)} secrets, "
                 f"{len(bank.guesses)} guessable, L={bank.word_length}, hard_mode={hard_mode}")

    # ---- input checks ----

    def _check_guess(self, guess: str) -> str:
        if not validate_guess(guess, self.bank):
            raise InvalidGuess(
                f"{guess!r} is not a {self.bank.word_length}-letter word from the word list")
        g = normalize(guess)
        if self.hard_mode:
            problem = hard_mode_violation(g, self.revealed_hints())
            if problem:
                raise InvalidGuess(f"hard mode: {problem}")
        return g

    def _check_secrets(self, secrets: Sequence[str]) -> Tuple[str, ...]:
        if isinstance(secrets, str):
            raise InvalidSecrets("expected one secret per board, got a single string")
        out = tuple(normalize(s) for s in secrets)
        if len(out) != self.num_targets:
            raise InvalidSecrets(f"expected {self.num_targets} secret(s); got {len(out)}")
        N = self.bank.word_length
        for s in out:
            if len(s) != N or not s.isalpha():
                raise InvalidSecrets(f"secret {s!r} is not a {N}-letter word")
            if s not in self.bank:
                # Legal, but that board will end up contradicted.
                log.warning(f"secret {s!r} is not in the word bank")
        return out

    # ---- the round ----

    def submit_guess(self, guess: str, secrets: Sequence[str] | None = None
                     ) -> List[Tuple[int, Verdict]]:
        """
        Play `guess` on every active board, scoring it against that board's
        secret.

        The engine does not pick secrets: they come from `secrets` (one per
        board, in board order) or, if omitted, from the ones given to
        load_bank.

        Returns:
            [(board index, verdict)] for the boards that were active.
        """
        g = self._check_guess(guess)
        if secrets is not None:
            secrets = self._check_secrets(secrets)
        elif self._secrets is not None:
            secrets = self._secrets
        else:
            raise InvalidSecrets("no secrets supplied; use apply_verdicts for external verdicts")

        verdicts = {i: score(g, secrets[i]) for i in self.active_targets()}
        return self._apply(g, verdicts)

    def apply_verdicts(
            self,
            guess: str,
            verdicts: Sequence[Verdict | str | None] | Mapping[int, Verdict | str],
    ) -> List[Tuple[int, Verdict]]:
        """
        Play `guess` with verdicts computed elsewhere.

        `verdicts` is either a sequence with one entry per board (None for
        boards that are no longer active) or a mapping {board index: verdict}
        covering exactly the active boards. Each verdict is a tuple of Tiles or
        a rendered string such as "#^-^-".

        Every verdict is checked before any board changes. A verdict no
        candidate agrees with leaves that board contradicted.
        """
        g = self._check_guess(guess)
        active = self.active_targets()
        N = self.bank.word_length

        if isinstance(verdicts, Mapping):
            given: Dict[int, object] = dict(verdicts)
        else:
            if isinstance(verdicts, str):
                raise InvalidVerdict("expected one verdict per board, got a single string")
            if len(verdicts) != self.num_targets:
                raise InvalidVerdict(
                    f"expected {self.num_targets} verdict(s); got {len(verdicts)}")
            given = {i: v for i, v in enumerate(verdicts) if v is not None}

        if set(given) != set(active):
            raise InvalidVerdict(
                f"verdicts must cover exactly the active boards {active}; got {sorted(given)}")

        parsed = {i: as_verdict(given[i], N) for i in active}
        return self._apply(g, parsed)

    def _apply(self, guess: str, verdicts: Dict[int, Verdict]) -> List[Tuple[int, Verdict]]:
        # Solved boards sit the round out, but playing their word wins them.
        for i, t in enumerate(self.trackers):
            if i not in verdicts and t.is_solved() and not self.is_won(i) \
                    and next(t.candidates()) == guess:
                self._won_round[i] = len(self._guesses)

        out: List[Tuple[int, Verdict]] = []
        for i in sorted(verdicts):
            left = self.trackers[i].apply(guess, verdicts[i])
            if left == 0:
                log.warning(f"board {i}: no candidate matches after {guess!r}")
            out.append((i, verdicts[i]))
        self._guesses.append(guess)
        log.debug(f"round {len(self._guesses)}: {guess} -> {len(out)} board(s)")
        return out

    # ---- queries ----

    @property
    def secrets(self) -> Tuple[str, ...] | None:
        return self._secrets

    @property
    def guesses(self) -> List[str]:
        """Every guess played so far, in order."""
        return list(self._guesses)

    def turns_left(self) -> int:
        return max(0, self.max_turns - len(self._guesses))

    def active_targets(self) -> List[int]:
        return [i for i, t in enumerate(self.trackers) if t.is_active()]

    def revealed_hints(self) -> List[Tuple[str, Verdict]]:
        """(guess, verdict) pairs of the active boards; hard mode checks against these."""
        hints: List[Tuple[str, Verdict]] = []
        for i in self.active_targets():
            hints.extend(self.trackers[i].history)
        return hints

    def pending_solutions(self) -> List[str]:
        """Words of boards that are solved but whose word hasn't been guessed yet."""
        out: List[str] = []
        for i, t in enumerate(self.trackers):
            if t.is_solved() and not self.is_won(i):
                w = next(t.candidates())
                if w not in out:
                    out.append(w)
        return out

    def is_won(self, index: int) -> bool:
        """Board `index` has had its word played."""
        return self.trackers[index].is_won() or index in self._won_round

    def won_round(self, index: int) -> int | None:
        """Round in which a board solved by deduction was won, if it was."""
        return self._won_round.get(index)

    def is_finished(self) -> bool:
        return all(self.is_won(i) or t.is_contradicted() for i, t in enumerate(self.trackers))

    def state(self) -> List[TargetState]:
        return [
            TargetState(
                index=i,
                candidate_count=t.candidate_count,
                solved=t.is_solved(),
                contradicted=t.is_contradicted(),
                history_length=len(t.history),
                won=self.is_won(i),
            )
            for i, t in enumerate(self.trackers)
        ]

    def raise_for_contradictions(self) -> None:
        bad = [i for i, t in enumerate(self.trackers) if t.is_contradicted()]
        if bad:
            raise InconsistentVerdict(bad)

    def recommend(self, pool: Iterable[str] | None = None, **kwargs):
        """Shortcut for multiwordle.advisors.recommend(self, pool, ...)."""
        return recommend(self, pool, **kwargs)

    def __repr__(self) -> str:
        return (f"Session(boards={self.num_targets}, active={len(self.active_targets())}, "
                f"rounds={len(self._guesses)})")
