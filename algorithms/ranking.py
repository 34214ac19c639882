from typing import List, Sequence, Tuple

from algorithms.lcs import compare_similarity


class EmptyOptionsError(ValueError):
    """Raised when a best match is requested from an empty set of options."""


def find_best_index(target: str, options: Sequence[str]) -> Tuple[int, float]:
    """Index and score of the best option; same tie and empty rules as find_best_similarity."""
    if not options:
        raise EmptyOptionsError("options must contain at least one string")
    best, high = 0, -1.0
    for i, option in enumerate(options):
        score = compare_similarity(option, target)
        # strict '>' keeps the first option on ties
        if score > high:
            best, high = i, score
    return best, high


def find_best_similarity(target: str, options: Sequence[str]) -> Tuple[str, float]:
    """
    Option most similar to target, with its score.
    Ties go to the earliest option; raises EmptyOptionsError on empty options.
    """
    i, score = find_best_index(target, options)
    return options[i], score


def get_similarity_ratings(target: str, options: Sequence[str]) -> List[float]:
    return [compare_similarity(option, target) for option in options]
