"""Data models for the matching engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from project_matcher.domain.models import Candidate


class MatchSignal(str, Enum):
    """Scoring rules a candidate can satisfy."""

    CODE = "code"
    LOCATION_FULL = "location_full"
    LOCATION_PREFIX = "location_prefix"
    NAME = "name"


@dataclass
class ScoredCandidate:
    """A candidate paired with its score for one ranking call.

    Attributes:
        candidate: The candidate exactly as passed in (never copied)
        score: Sum of the weights of every rule that matched
        signals: Rules that matched, in evaluation order
    """

    candidate: Candidate
    score: int = 0
    signals: List[MatchSignal] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return self.score > 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for --explain output and logs."""
        record = self.candidate.source_record
        if record is None:
            record = self.candidate.model_dump()
        return {
            "project": record,
            "score": self.score,
            "signals": [signal.value for signal in self.signals],
        }
