"""Pytest configuration and fixtures shared across all test modules.

The server module reads its configuration at import time, so the environment
defaults are set here before any test imports it.
"""

import json
import os
from typing import Any, Optional

import pytest
import requests

os.environ.setdefault("SEC_EDGAR_USER_AGENT", "Test Agent test@example.com")
os.environ.setdefault("SEC_EDGAR_RATE_LIMIT_MS", "0")

from mcp_sec_edgar.config import EdgarConfig  # noqa: E402
from mcp_sec_edgar.core.client import EdgarClient  # noqa: E402

TEST_USER_AGENT = "Test Agent test@example.com"


def build_response(
    body: Any = "", status: int = 200, reason: Optional[str] = None, url: str = "https://example.test/"
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason or ("OK" if status == 200 else "Error")
    response.url = url
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def edgar_config() -> EdgarConfig:
    return EdgarConfig(user_agent=TEST_USER_AGENT, rate_limit_interval=0.0, timeout=5.0)


@pytest.fixture
def client(edgar_config) -> EdgarClient:
    return EdgarClient(edgar_config)
