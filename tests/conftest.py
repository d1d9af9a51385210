"""Root-level pytest configuration."""

import pytest

from discharge.core.config import _ENV_TO_FIELD

SAMPLE_EXPORT_LINES = [
    "Circulation report",
    "",
    "ABC",
    "Smith, John",
    "Cats and Dogs / A Tale",
    "copy: 2 of 3",
    "item ID: ::12345 extra",
    "type: BOOK more",
    "location: KIDS-A1 zone",
    "Date of discharge: 2024-01-05",
    "copy: 1 of 1",
    "item ID: 67890",
    "Date of discharge: 2024-01-06",
    "GN FANTASY",
    "Ito, Junji",
    "Uzumaki / Junji Ito",
    "copy: 1 of 2",
    "item ID: 55501",
    "type: COMIC",
    "location: ADULT-GN shelf",
    "Date of discharge: 2024-01-07",
    "Page 1 of 1",
]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and DISCHARGE_* variables out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for env_key in _ENV_TO_FIELD:
        monkeypatch.delenv(env_key, raising=False)

@pytest.fixture
def sample_lines():
    """A small export with three discharged items and surrounding noise."""
    return list(SAMPLE_EXPORT_LINES)

@pytest.fixture
def sample_export(tmp_path, sample_lines):
    """The sample export written to disk with CRLF line endings."""
    path = tmp_path / "export.txt"
    path.write_bytes("\r\n".join(sample_lines).encode("utf-8") + b"\r\n")
    return path
