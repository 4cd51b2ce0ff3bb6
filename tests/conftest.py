"""Root pytest configuration."""
import os
from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from serverless_import.services.importer.config import ImporterSettings, set_settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that run the CLI in a subprocess"
    )


def pytest_runtest_setup(item):
    """Skip integration tests if not enabled."""
    if item.get_closest_marker("integration") and not os.getenv("RUN_INTEGRATION_TESTS"):
        pytest.skip("Integration tests skipped. Set RUN_INTEGRATION_TESTS=1 to run.")


@pytest.fixture(autouse=True)
def reset_settings():
    """Keep the global settings instance from leaking between tests."""
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def settings() -> ImporterSettings:
    """Default settings, ignoring any .env file."""
    return ImporterSettings(_env_file=None)


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Temporary project root used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(workdir) -> Callable[[str, Any], Path]:
    """Write a config file below the working directory.

    Mappings are dumped as YAML (or JSON for ``.json`` files); strings are
    written verbatim.

    Example:
        write_config("shared/serverless.yml", {"provider": {"name": "aws"}})
    """
    def _write(relative_path: str, content: Any) -> Path:
        path = workdir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            text = content
        elif path.suffix == ".json":
            import json
            text = json.dumps(content)
        else:
            text = yaml.safe_dump(content, sort_keys=False)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
