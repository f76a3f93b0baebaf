"""Text helpers for building the search haystack and address prefixes."""

import re
from typing import Optional

from project_matcher.domain.models import SourceText

# Addresses are tokenized on runs of whitespace and commas
ADDRESS_TOKEN_SEPARATOR = re.compile(r"[\s,]+")


def build_haystack(source_text: Optional[SourceText]) -> str:
    """Join the present email fields with spaces and lower-case the result.

    Args:
        source_text: Email text fields, or None

    Returns:
        Lower-cased search text (empty string when nothing is present)

    Example:
        >>> build_haystack(SourceText(subject="RE: Job 4521-B", from_name="Ann Lee"))
        're: job 4521-b ann lee'
    """
    if source_text is None:
        return ""
    return " ".join(source_text.present_fields()).lower()


def street_prefix(location_text: Optional[str], token_count: int = 2) -> Optional[str]:
    """Return the first ``token_count`` address tokens joined by a single space.

    "123 Main Street, Springfield" gives "123 main". Punctuation other than
    commas is kept, so "123, Main St" and "123 Main St" both give "123 main"
    while "123-A Main St" gives "123-a main".

    Returns:
        Lower-cased prefix, or None if the address has fewer tokens
    """
    if not location_text:
        return None
    tokens = [token for token in ADDRESS_TOKEN_SEPARATOR.split(location_text.lower()) if token]
    if len(tokens) < token_count:
        return None
    return " ".join(tokens[:token_count])
