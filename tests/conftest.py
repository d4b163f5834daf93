"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from ticketlint.rules import ParsedCommit


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def valid_commit():
    """A parsed commit whose subject carries a ticket prefix."""
    return ParsedCommit(
        header="feat: [JIRA-1234] fulfill this feature",
        type="feat",
        subject="[JIRA-1234] fulfill this feature",
    )


@pytest.fixture
def invalid_commit():
    """A parsed commit whose subject has no ticket prefix."""
    return ParsedCommit(
        header="feat: fulfill this feature",
        type="feat",
        subject="fulfill this feature",
    )
