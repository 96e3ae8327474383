"""Query matching for routes, directions, and stops."""

from nexttrip.matching.matcher import first_match
from nexttrip.matching.normalizers import normalize_text

__all__ = [
    "first_match",
    "normalize_text",
]
