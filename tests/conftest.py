"""
Shared pytest fixtures for bazel-version tests.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Test helpers live beside this file
tests_dir = Path(__file__).parent
if str(tests_dir) not in sys.path:
    sys.path.insert(0, str(tests_dir))


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from bazel_version.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def fresh_config_manager(monkeypatch):
    """
    Fresh ConfigManager singleton, with no .env file lookups.
    """
    from bazel_version.config import settings
    
    monkeypatch.setattr(settings.ConfigManager, "_instance", None)
    monkeypatch.setattr(settings, "load_dotenv", Mock(return_value=False))
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv(settings.LOG_LEVEL_ENV, raising=False)
    return settings.ConfigManager.get_instance()


@pytest.fixture
def fresh_logger(fresh_config_manager, monkeypatch):
    """
    Unbuilt shared logger with no handlers, so it binds the captured stderr.
    
    Set configuration env vars before calling get_logger().
    """
    import logging
    from bazel_version.utils import logger as logger_module
    
    package_logger = logging.getLogger(logger_module.DEFAULT_LOGGER_NAME)
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(logger_module, "_logger", None)
    return logger_module
