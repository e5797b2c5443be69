"""Conftest for pytest configuration."""

import pytest


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run integration tests (requires running OpenSocial server)",
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if config.getoption("--integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at a temp directory and clear env overrides."""
    config_dir = tmp_path / "opensocial"
    monkeypatch.setenv("OPENSOCIAL_CONFIG_DIR", str(config_dir))
    for var in ("OPENSOCIAL_SERVER", "OPENSOCIAL_TOKEN", "OPENSOCIAL_USER_ID"):
        monkeypatch.delenv(var, raising=False)
    return config_dir
