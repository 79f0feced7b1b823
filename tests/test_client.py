"""Unit tests for the rate-limited EDGAR client."""

import time
from unittest.mock import AsyncMock, patch

import pytest
import requests

from mcp_sec_edgar.config import EdgarConfig
from mcp_sec_edgar.core.client import EdgarClient
from mcp_sec_edgar.core.rate_limiter import RateLimiter
from mcp_sec_edgar.utils.exceptions import ParseError, TransportError, UpstreamStatusError

TEST_USER_AGENT = "Test Agent test@example.com"
URL = "https://data.sec.gov/submissions/CIK0000320193.json"


class TestDispatch:
    """Headers, status handling and failure kinds of EdgarClient.dispatch."""

    @pytest.mark.asyncio
    async def test_attaches_identifying_header(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("{}")) as mock_get:
            await client.dispatch(URL)

        headers = mock_get.call_args.kwargs["headers"]
        assert headers["User-Agent"] == TEST_USER_AGENT
        assert headers["Accept"] == "application/json"
        assert mock_get.call_args.args[0] == URL

    @pytest.mark.asyncio
    async def test_caller_headers_merge_without_dropping_user_agent(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("")) as mock_get:
            await client.dispatch(URL, {"Accept": "text/html", "X-Extra": "1"})

        headers = mock_get.call_args.kwargs["headers"]
        assert headers == {"User-Agent": TEST_USER_AGENT, "Accept": "text/html", "X-Extra": "1"}

    @pytest.mark.asyncio
    async def test_caller_can_override_user_agent(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("")) as mock_get:
            await client.dispatch(URL, {"User-Agent": "Other other@example.com"})

        assert mock_get.call_args.kwargs["headers"]["User-Agent"] == "Other other@example.com"

    @pytest.mark.asyncio
    async def test_passes_configured_timeout(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("")) as mock_get:
            await client.dispatch(URL)

        assert mock_get.call_args.kwargs["timeout"] == 5.0

    @pytest.mark.asyncio
    async def test_success_returns_response_unmodified(self, client, make_response):
        response = make_response('{"name": "Apple Inc."}')
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=response):
            result = await client.dispatch(URL)

        assert result is response
        assert result.text == '{"name": "Apple Inc."}'

    @pytest.mark.asyncio
    async def test_non_2xx_raises_status_error(self, client, make_response):
        response = make_response("not found", status=404, reason="Not Found")
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=response):
            with pytest.raises(UpstreamStatusError) as exc_info:
                await client.dispatch(URL)

        error = exc_info.value
        assert "EDGAR API error 404" in str(error)
        assert "Not Found" in str(error)
        assert error.status == 404
        assert error.status_text == "Not Found"
        assert error.body_excerpt == "not found"

    @pytest.mark.asyncio
    async def test_error_body_excerpt_is_truncated(self, client, make_response):
        response = make_response("x" * 2000, status=503, reason="Service Unavailable")
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=response):
            with pytest.raises(UpstreamStatusError) as exc_info:
                await client.dispatch(URL)

        assert len(exc_info.value.body_excerpt) == 500

    @pytest.mark.asyncio
    async def test_redirect_status_is_not_success(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("", status=304)):
            with pytest.raises(UpstreamStatusError):
                await client.dispatch(URL)

    @pytest.mark.asyncio
    async def test_network_failure_raises_transport_error(self, client):
        with patch(
            "mcp_sec_edgar.core.client.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with pytest.raises(TransportError) as exc_info:
                await client.dispatch(URL)

        assert not isinstance(exc_info.value, UpstreamStatusError)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_propagates_as_transport_error(self, client):
        with patch("mcp_sec_edgar.core.client.requests.get", side_effect=requests.Timeout("timed out")):
            with pytest.raises(TransportError):
                await client.dispatch(URL)

    @pytest.mark.asyncio
    async def test_failed_request_is_not_retried(self, client, make_response):
        with patch(
            "mcp_sec_edgar.core.client.requests.get", return_value=make_response("", status=500)
        ) as mock_get:
            with pytest.raises(UpstreamStatusError):
                await client.dispatch(URL)

        assert mock_get.call_count == 1


class TestRateLimiting:
    """Every dispatch passes through the shared limiter."""

    @pytest.mark.asyncio
    async def test_every_dispatch_acquires_the_limiter(self, edgar_config, make_response):
        limiter = RateLimiter(0.0)
        limiter.acquire = AsyncMock(return_value=0.0)
        client = EdgarClient(edgar_config, rate_limiter=limiter)

        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("", status=404)):
            for _ in range(2):
                with pytest.raises(UpstreamStatusError):
                    await client.dispatch(URL)

        assert limiter.acquire.await_count == 2

    @pytest.mark.asyncio
    async def test_back_to_back_dispatches_are_spaced(self, make_response):
        client = EdgarClient(EdgarConfig(user_agent=TEST_USER_AGENT, rate_limit_interval=0.1))

        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("{}")):
            start = time.monotonic()
            for _ in range(3):
                await client.dispatch(URL)
            elapsed = time.monotonic() - start

        assert elapsed >= 0.18

    def test_limiter_built_from_config(self):
        client = EdgarClient(EdgarConfig(user_agent=TEST_USER_AGENT, rate_limit_interval=0.25))

        assert client.rate_limiter.min_interval == 0.25


class TestBodyHelpers:

    @pytest.mark.asyncio
    async def test_get_json_decodes_body(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response({"cik": "320193"})):
            assert await client.get_json(URL) == {"cik": "320193"}

    @pytest.mark.asyncio
    async def test_get_json_malformed_body_raises_parse_error(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("<html>oops</html>")):
            with pytest.raises(ParseError):
                await client.get_json(URL)

    @pytest.mark.asyncio
    async def test_get_text_returns_body(self, client, make_response):
        with patch("mcp_sec_edgar.core.client.requests.get", return_value=make_response("<p>hi</p>")):
            assert await client.get_text(URL) == "<p>hi</p>"
