"""Tests for the page fetcher."""

from __future__ import annotations

import httpx
import pytest
import respx

from linkcheck.checker.errors import PageFetchError
from linkcheck.checker.fetcher import fetch_page


_URL = "https://example.com/article"


class TestFetchPage:
    def test_successful_fetch_returns_html(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, text="<p>hello</p>"))
            html = fetch_page(_URL, timeout=10.0, user_agent="ua/1.0")

        assert html == "<p>hello</p>"

    def test_follows_redirects(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(
                return_value=httpx.Response(302, headers={"Location": "https://example.com/moved"})
            )
            respx.get("https://example.com/moved").mock(
                return_value=httpx.Response(200, text="moved")
            )
            html = fetch_page(_URL, timeout=10.0, user_agent="ua/1.0")

        assert html == "moved"

    @pytest.mark.parametrize("status", [404, 500, 503])
    def test_http_error_raises(self, status: int) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(status))
            with pytest.raises(PageFetchError):
                fetch_page(_URL, timeout=10.0, user_agent="ua/1.0")

    def test_timeout_raises(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ReadTimeout)
            with pytest.raises(PageFetchError):
                fetch_page(_URL, timeout=10.0, user_agent="ua/1.0")

    def test_error_chains_original_exception(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ConnectError)
            with pytest.raises(PageFetchError) as excinfo:
                fetch_page(_URL, timeout=10.0, user_agent="ua/1.0")

        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
