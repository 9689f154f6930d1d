"""
Pytest fixtures for the legal risk analyzer tests.

Log files are disabled so test runs only write to stdout.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("LOG_TO_FILE", "false")

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.legal_issue_detector import LegalIssueDetector  # noqa: E402


@pytest.fixture
def detector():
    return LegalIssueDetector()


@pytest.fixture
def client():
    """FastAPI TestClient around the analyzer app."""
    from fastapi.testclient import TestClient

    from app import app

    return TestClient(app)
