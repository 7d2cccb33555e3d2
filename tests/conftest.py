"""
Shared fixtures for the test suite.
"""
import pytest

from core.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings."""
    for name in ("LOG_LEVEL", "FILE_ENCODING", "ERROR_POLICY", "SKIP_BLANK_LINES", "EXPORT_PATH", "APP_NAME"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def write_statement(tmp_path):
    """Write lines to a statement file and return its path."""
    def _write(lines, name="statement.tab", newline="\n", encoding="utf-8"):
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode(encoding))
        return str(path)
    return _write
