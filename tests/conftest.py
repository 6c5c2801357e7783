"""
Global pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

from procapi.server.core.config import DocumentConfigModel

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def document_config() -> DocumentConfigModel:
    """Minimal document metadata shared by generator tests."""
    return DocumentConfigModel.model_validate(
        {"title": "procapi", "version": "1.0.0", "baseUrl": "http://localhost:3000/api"}
    )


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
