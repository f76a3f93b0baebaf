"""Shared fixtures for project matcher tests."""

import pytest

from project_matcher.domain.models import Candidate, SourceText
from project_matcher.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host LOG_LEVEL/ENVIRONMENT from leaking into tests."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def permit_email():
    """Email referencing a project number and a street address."""
    return SourceText(
        subject="RE: Permit for job 4521-B",
        from_email="inspector@springfield.gov",
        from_name="Building Department",
        snippet="Inspection scheduled for the work at 123 Main Street, Springfield next week.",
    )


@pytest.fixture
def project_records():
    """Raw project records as the record source delivers them."""
    return [
        {
            "id": "p-1",
            "name": "Riverside Lofts",
            "project_number": "4521-B",
            "properties": {"address": "900 River Road, Springfield"},
        },
        {
            "id": "p-2",
            "name": "Main Street Renovation",
            "project_number": "3300",
            "properties": {"address": "123 Main Street, Springfield"},
        },
        {
            "id": "p-3",
            "name": "Harbor Point",
            "project_number": "7777",
            "properties": None,
        },
    ]


@pytest.fixture
def project_candidates(project_records):
    """Candidates adapted from project_records."""
    return [Candidate.from_project_record(record) for record in project_records]
