from .io import read_words, read_lines

__all__ = ["read_words", "read_lines"]
