import pytest

from termbutton.config import loader


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with file I/O")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the user's config and debug settings."""
    monkeypatch.delenv("TERMBUTTON_CONFIG", raising=False)
    monkeypatch.delenv("TERMBUTTON_DEBUG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    loader.clear_cache()
    yield
    loader.clear_cache()


@pytest.fixture
def debug_logs(monkeypatch, tmp_path):
    """Enable debug logging into a temporary directory."""
    logs_dir = tmp_path / "logs"
    monkeypatch.setenv("TERMBUTTON_DEBUG", "1")
    monkeypatch.setenv("TERMBUTTON_LOG_DIR", str(logs_dir))

    def _read() -> str:
        return "".join(p.read_text() for p in sorted(logs_dir.glob("*.log")))

    return _read


@pytest.fixture
def noop_callback():
    """Button callback that does nothing."""
    return lambda: None
