"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── identity_config/        # Settings tests
    ├── identity_store/
    │   ├── unit/               # Fast, isolated tests (mocks only)
    │   └── integration/        # Repositories and stores on in-memory SQLite
    └── shared/                 # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests (external databases)

Pytest Options:
    --run-integration    Run integration tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from identity_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need an external database (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip external-database tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Every test starts with freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
