"""Scoring engine that suggests projects for an inbound email.

Each candidate project is scored against the lower-cased text of the email
(subject, sender address, sender name, snippet) using additive substring
rules:

- project number found: strongest signal
- full address found, or failing that its street number and name
- project name found (names shorter than a floor are ignored)

Candidates scoring zero are dropped and the rest are returned best first.
Equal scores keep their input order.
"""

import logging
from typing import List, Optional, Sequence

from project_matcher.config.models import ScoringConfig
from project_matcher.domain.models import Candidate, SourceText
from project_matcher.logging import get_logger

from .models import MatchSignal, ScoredCandidate
from .text import build_haystack, street_prefix

logger = get_logger(__name__, component="matching")


class ProjectMatcher:
    """Ranks candidate projects by lexical relevance to an email.

    Holds only its scoring configuration, so one instance can be shared
    across threads and reused for any number of calls.
    """

    def __init__(
        self,
        scoring: Optional[ScoringConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize ProjectMatcher.

        Args:
            scoring: Weights and thresholds (defaults to ScoringConfig())
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.scoring = scoring or ScoringConfig()
        self.logger = logger_instance or logger

    def rank(
        self, source_text: Optional[SourceText], candidates: Sequence[Candidate]
    ) -> List[Candidate]:
        """Return the candidates that match the email, best first.

        Args:
            source_text: Email text fields, or None
            candidates: Projects to consider (may be empty)

        Returns:
            Subset of ``candidates`` with a positive score, sorted by score
            descending; the objects are the ones passed in
        """
        return [scored.candidate for scored in self.evaluate(source_text, candidates)]

    def evaluate(
        self, source_text: Optional[SourceText], candidates: Sequence[Candidate]
    ) -> List[ScoredCandidate]:
        """Score and rank candidates, keeping the score and matched signals.

        Same filtering and ordering as rank().
        """
        if source_text is None or not candidates:
            return []

        haystack = build_haystack(source_text)
        if not haystack.strip():
            self.logger.debug(
                "Email has no searchable text",
                extra={"event": "matching.rank.empty_text", "candidates": len(candidates)},
            )
            return []

        scored = [self.score_candidate(haystack, candidate) for candidate in candidates]
        matches = [item for item in scored if item.is_match]
        # sorted() is stable, so equal scores stay in input order
        matches = sorted(matches, key=lambda item: item.score, reverse=True)

        if self.scoring.max_suggestions is not None:
            matches = matches[: self.scoring.max_suggestions]

        self.logger.debug(
            "Ranked projects for email",
            extra={
                "event": "matching.rank.completed",
                "candidates": len(candidates),
                "matches": len(matches),
                "top_score": matches[0].score if matches else 0,
            },
        )
        return matches

    def score_candidate(self, haystack: str, candidate: Candidate) -> ScoredCandidate:
        """Apply every scoring rule to one candidate.

        Args:
            haystack: Lower-cased email text from build_haystack()
            candidate: Project to score

        Returns:
            ScoredCandidate (score may be zero)
        """
        scoring = self.scoring
        result = ScoredCandidate(candidate=candidate)

        if candidate.code and candidate.code.lower() in haystack:
            result.score += scoring.code_weight
            result.signals.append(MatchSignal.CODE)

        if candidate.location_text:
            location = candidate.location_text.lower()
            if location in haystack:
                result.score += scoring.location_full_weight
                result.signals.append(MatchSignal.LOCATION_FULL)
            else:
                prefix = street_prefix(location, scoring.prefix_token_count)
                if (
                    prefix is not None
                    and len(prefix) >= scoring.min_prefix_length
                    and prefix in haystack
                ):
                    result.score += scoring.location_prefix_weight
                    result.signals.append(MatchSignal.LOCATION_PREFIX)

        if candidate.display_name:
            name = candidate.display_name.lower()
            if len(name) >= scoring.min_name_length and name in haystack:
                result.score += scoring.name_weight
                result.signals.append(MatchSignal.NAME)

        return result


_default_matcher = ProjectMatcher()


def rank(source_text: Optional[SourceText], candidates: Sequence[Candidate]) -> List[Candidate]:
    """Rank candidates against an email using the default weights."""
    return _default_matcher.rank(source_text, candidates)


def evaluate(
    source_text: Optional[SourceText], candidates: Sequence[Candidate]
) -> List[ScoredCandidate]:
    """Like rank(), but returns scores and matched signals."""
    return _default_matcher.evaluate(source_text, candidates)
