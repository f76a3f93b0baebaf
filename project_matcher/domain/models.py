"""Core domain models for email matching.

This module defines the data structures the matcher consumes:
- SourceText: free-text view of an inbound email (subject, sender, snippet)
- Candidate: a business record (project) that an email may belong to

Both are plain values built by the caller. The matcher never fetches,
stores or mutates them.
"""

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from .exceptions import RecordFormatError


class SourceText(BaseModel):
    """Free-text fields of an inbound email used for matching.

    Every field is optional. Absent fields are skipped when the search text
    is assembled rather than being treated as empty strings.
    """

    subject: Optional[str] = Field(None, description="Email subject line")
    from_email: Optional[str] = Field(None, description="Sender address")
    from_name: Optional[str] = Field(None, description="Sender display name")
    snippet: Optional[str] = Field(None, description="Preview text of the body")

    def present_fields(self) -> List[str]:
        """Return the fields that carry text, in haystack order.

        Empty strings are dropped along with None values.
        """
        values = (self.subject, self.from_email, self.from_name, self.snippet)
        return [value for value in values if value]

    @classmethod
    def from_record(cls, record: Optional[Mapping[str, Any]]) -> Optional["SourceText"]:
        """Build a SourceText from an inbound-email record.

        Args:
            record: Mapping with subject/from_email/from_name/snippet keys,
                or None when there is no email

        Returns:
            SourceText, or None if record is None

        Raises:
            RecordFormatError: If the record is not a mapping or a field is not text
        """
        if record is None:
            return None
        if not isinstance(record, Mapping):
            raise RecordFormatError(
                f"Email record must be an object, got {type(record).__name__}"
            )
        try:
            return cls.model_validate(dict(record))
        except ValidationError as e:
            raise RecordFormatError(f"Invalid email record: {_describe(e)}") from e

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "json_schema_extra": {"example": {
            "subject": "RE: Permit for job 4521-B",
            "from_email": "inspector@springfield.gov",
            "from_name": "Building Department",
            "snippet": "The permit for 123 Main Street has been approved...",
        }},
    }


class Candidate(BaseModel):
    """A target record evaluated for association with an email.

    The identifier is opaque and returned untouched. The original record the
    candidate was adapted from, if any, is carried in ``source_record`` so
    callers can map ranked candidates back to their own data.
    """

    identifier: Any = Field(..., description="Opaque record key")
    display_name: Optional[str] = Field(None, description="Short project name")
    code: Optional[str] = Field(None, description="Project number, the strongest signal")
    location_text: Optional[str] = Field(None, description="Free-text address")
    source_record: Optional[Any] = Field(
        None, exclude=True, repr=False, description="Record this candidate was built from"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_project_record(cls, record: Mapping[str, Any]) -> "Candidate":
        """Adapt a project record into a Candidate.

        Field mapping:
        - id -> identifier
        - name -> display_name
        - project_number -> code
        - properties.address -> location_text (properties may be missing or null)

        Args:
            record: Project record mapping

        Returns:
            Candidate holding a reference to ``record``

        Raises:
            RecordFormatError: If the record shape is invalid
        """
        if not isinstance(record, Mapping):
            raise RecordFormatError(
                f"Project record must be an object, got {type(record).__name__}"
            )

        properties = record.get("properties")
        if properties is not None and not isinstance(properties, Mapping):
            raise RecordFormatError(
                f"Project 'properties' must be an object or null, got {type(properties).__name__}"
            )

        try:
            return cls(
                identifier=record.get("id"),
                display_name=record.get("name"),
                code=record.get("project_number"),
                location_text=properties.get("address") if properties else None,
                source_record=record,
            )
        except ValidationError as e:
            raise RecordFormatError(
                f"Invalid project record {record.get('id')!r}: {_describe(e)}"
            ) from e


def _describe(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line."""
    parts = []
    for item in error.errors():
        field_path = ".".join(str(loc) for loc in item["loc"])
        parts.append(f"{field_path}: {item['msg']}")
    return "; ".join(parts)
