"""
Error kinds raised by the engine.

Everything derives from ValueError: bad input is a value problem, and callers
that already catch ValueError keep working.
"""


class MultiWordleError(ValueError):
    """Base class for all engine errors."""


class InvalidBank(MultiWordleError):
    """Word list is empty after filtering or has no consistent word length."""


class InvalidTargetCount(MultiWordleError):
    """Number of simultaneous targets is not a positive integer."""


class InvalidGuess(MultiWordleError):
    """Guess is malformed, not guessable, or breaks hard-mode hints."""


class InvalidVerdict(MultiWordleError):
    """Verdict has the wrong length or uses unknown symbols."""


class InvalidSecrets(MultiWordleError):
    """Secrets are missing, the wrong count, or not words of the bank's length."""


class EmptyPool(MultiWordleError):
    """Guess pool override excluded every word."""


class InconsistentVerdict(MultiWordleError):
    """
    One or more targets ran out of candidates.

    Only raised on request (Session.raise_for_contradictions); normally a
    contradiction is reported as target state so the other boards continue.
    """

    def __init__(self, targets):
        self.targets = list(targets)
        super().__init__(
            f"verdicts are inconsistent with every candidate for target(s) {self.targets}")
