"""Stateless string and algorithm utilities, with a small FastAPI service on top."""
__version__ = "0.1.0"

from textkit.puzzles import max_path_sum, two_sum  # noqa: E402
from textkit.similarity import NgramMatch, ngram_match, ngrams, similarity  # noqa: E402
from textkit.sorting import insertion_sort  # noqa: E402

__all__ = [
    "NgramMatch",
    "insertion_sort",
    "max_path_sum",
    "ngram_match",
    "ngrams",
    "similarity",
    "two_sum",
]
