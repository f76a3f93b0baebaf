"""Domain models for the project suggestion matcher."""

from .exceptions import RecordFormatError
from .models import Candidate, SourceText

__all__ = ["SourceText", "Candidate", "RecordFormatError"]
