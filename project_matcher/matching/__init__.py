"""Email-to-project matching.

This module provides:
- ProjectMatcher: scores and ranks candidates against an email's text
- rank / evaluate: module-level shortcuts using the default weights
- ScoredCandidate, MatchSignal: per-candidate scoring detail
- build_haystack, street_prefix: text helpers shared by the scoring rules
"""

from .engine import ProjectMatcher, evaluate, rank
from .models import MatchSignal, ScoredCandidate
from .text import build_haystack, street_prefix

__all__ = [
    "ProjectMatcher",
    "rank",
    "evaluate",
    "MatchSignal",
    "ScoredCandidate",
    "build_haystack",
    "street_prefix",
]
