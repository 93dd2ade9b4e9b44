from multiwordle.session.core import default_max_turns
from .core import play_game, run_batch, sample_secrets
from .io import write_csv, write_manifest

__all__ = ["play_game", "run_batch", "sample_secrets", "default_max_turns", "write_csv",
           "write_manifest"]
