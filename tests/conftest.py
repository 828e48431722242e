import pytest
import sys
import os
import logging
from unittest.mock import MagicMock

import requests

# Ensure the project root is in the Python path for imports in tests
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from config_loader import default_config


@pytest.fixture(autouse=True)
def configure_logging(caplog):
    """Ensure logging is configured to capture DEBUG level messages for all tests."""
    caplog.set_level(logging.DEBUG, logger="root")


@pytest.fixture
def mock_config(tmp_path):
    """Defaults with a temp output dir, a single stylesheet and no retry delay."""
    config = default_config()
    config.update({
        'output_dir': str(tmp_path / "ebook"),
        'stylesheet_urls': ("https://redislabs.com/wp-content/themes/twentyeleven/style.css",),
        'retry_delay_seconds': 0,
        'request_timeout_seconds': 5,
        'user_agent': 'Test User Agent',
    })
    return config


def make_response(status_code=200, content=b""):
    """Creates a MagicMock standing in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.close = MagicMock()
    return response


@pytest.fixture
def response_factory():
    return make_response
