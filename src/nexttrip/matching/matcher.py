"""First-match-wins substring matching shared by all resolvers."""

from collections.abc import Callable, Iterable
from typing import TypeVar

from nexttrip.matching.normalizers import normalize_text

T = TypeVar("T")


def first_match(query: str, candidates: Iterable[T], key: Callable[[T], str]) -> T | None:
    """Find the first candidate whose key contains the query.

    Candidates are scanned in the order given (server order); a later, closer
    label never displaces an earlier hit.

    Args:
        query: Free-text query typed by the user.
        candidates: Items to scan.
        key: Returns the text to match against for a candidate.

    Returns:
        The first matching candidate, or None if nothing matches.
    """
    query_normalized = normalize_text(query)
    for candidate in candidates:
        if query_normalized in normalize_text(key(candidate)):
            return candidate
    return None
