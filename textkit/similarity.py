"""N-gram string similarity."""
from collections import Counter
from dataclasses import dataclass
from typing import List

from textkit.errors import InvalidArgumentError

DEFAULT_SUBSTRING_LENGTH = 3


@dataclass(frozen=True)
class NgramMatch:
    """Matched n-gram count and the denominator used to normalize it."""

    matches: int
    adjusted_length: int

    @property
    def score(self) -> float:
        if self.adjusted_length == 0:
            return 0.0
        return 2 * self.matches / self.adjusted_length


def _check_substring_length(substring_length: int) -> None:
    # bool is an int subclass; True would silently mean k=1
    if isinstance(substring_length, bool) or not isinstance(substring_length, int):
        raise InvalidArgumentError(
            "substring_length must be an integer",
            details={"substring_length": repr(substring_length)},
        )
    if substring_length < 1:
        raise InvalidArgumentError(
            f"substring_length must be >= 1, got {substring_length}",
            details={"substring_length": substring_length},
        )


def ngrams(text: str, substring_length: int = DEFAULT_SUBSTRING_LENGTH) -> List[str]:
    """All contiguous substrings of ``substring_length`` chars, in order of offset."""
    _check_substring_length(substring_length)
    if not isinstance(text, str):
        raise InvalidArgumentError("ngrams input must be a string")
    return [text[i : i + substring_length] for i in range(len(text) - substring_length + 1)]


def ngram_match(
    first: str,
    second: str,
    substring_length: int = DEFAULT_SUBSTRING_LENGTH,
    case_sensitive: bool = False,
) -> NgramMatch:
    """
    Count n-grams of ``second`` matched against unmatched n-grams of ``first``.

    Every n-gram of ``first`` can be matched at most as many times as it occurs
    there: a match consumes one occurrence. If either string (after case
    folding) is shorter than ``substring_length``, nothing can match and the
    result is ``NgramMatch(0, 0)``.

    Args:
      first: string to compare
      second: string to compare
      substring_length: n-gram size, must be >= 1
      case_sensitive: when false, both strings are casefolded first

    Raises:
      InvalidArgumentError: if ``substring_length`` is not a positive integer
        or either input is not a string
    """
    _check_substring_length(substring_length)
    if not isinstance(first, str) or not isinstance(second, str):
        raise InvalidArgumentError("similarity inputs must be strings")

    if not case_sensitive:
        first = first.casefold()
        second = second.casefold()

    if len(first) < substring_length or len(second) < substring_length:
        return NgramMatch(matches=0, adjusted_length=0)

    remaining = Counter(ngrams(first, substring_length))

    matches = 0
    for gram in ngrams(second, substring_length):
        if remaining[gram] > 0:
            remaining[gram] -= 1
            matches += 1

    # k-1 trailing positions in each string cannot start a full n-gram
    adjusted_length = len(first) + len(second) - 2 * (substring_length - 1)
    return NgramMatch(matches=matches, adjusted_length=adjusted_length)


def similarity(
    first: str,
    second: str,
    substring_length: int = DEFAULT_SUBSTRING_LENGTH,
    case_sensitive: bool = False,
) -> float:
    """
    Similarity of two strings in [0, 1], based on shared fixed-length substrings.

    ``2 * matches / (len(first) + len(second) - 2 * (substring_length - 1))``,
    where ``matches`` is computed by :func:`ngram_match`.

    >>> round(similarity("casa", "casaco"), 4)
    0.6667

    "casa" yields "cas", "asa"; "casaco" yields "cas", "asa", "sac", "aco".
    Two of them match, and the adjusted length is 4 + 6 - 2 * 2 = 6.
    """
    return ngram_match(first, second, substring_length, case_sensitive).score
