"""Tests for the HTTP probe.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made.
- Paths that ``respx`` cannot produce (a client that hangs, or one that raises
  ``HTTPStatusError``) use a tiny stand-in client object instead.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from backend.links.models import ProbeOutcome
from backend.links.probe import probe


class _HangingClient:
    async def get(self, url: str) -> httpx.Response:
        await asyncio.sleep(10)
        raise AssertionError("should have timed out")


class _RaisingClient:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    async def get(self, url: str) -> httpx.Response:
        raise self.exc


class TestProbe:
    async def test_ok_response(self) -> None:
        with respx.mock:
            respx.get("https://example.com/ok").mock(return_value=httpx.Response(200))
            async with httpx.AsyncClient(follow_redirects=True) as client:
                outcome = await probe(client, "https://example.com/ok")

        assert outcome == ProbeOutcome(status_code=200, final_url="https://example.com/ok")
        assert outcome.responded is True

    async def test_follows_redirects(self) -> None:
        with respx.mock:
            respx.get("https://example.com/moved").mock(
                return_value=httpx.Response(
                    301, headers={"Location": "https://example.com/new"}
                )
            )
            respx.get("https://example.com/new").mock(return_value=httpx.Response(200))
            async with httpx.AsyncClient(follow_redirects=True) as client:
                outcome = await probe(client, "https://example.com/moved")

        assert outcome.status_code == 200
        assert outcome.final_url == "https://example.com/new"

    @pytest.mark.parametrize("status", [404, 410, 500, 503])
    async def test_error_status_is_a_response(self, status: int) -> None:
        with respx.mock:
            respx.get("https://example.com/bad").mock(return_value=httpx.Response(status))
            async with httpx.AsyncClient(follow_redirects=True) as client:
                outcome = await probe(client, "https://example.com/bad")

        assert outcome.status_code == status
        assert outcome.final_url == "https://example.com/bad"

    async def test_connection_error_yields_no_response(self) -> None:
        with respx.mock:
            respx.get("https://example.com/down").mock(side_effect=httpx.ConnectError)
            async with httpx.AsyncClient(follow_redirects=True) as client:
                outcome = await probe(client, "https://example.com/down")

        assert outcome.status_code is None
        assert outcome.final_url == ""
        assert outcome.responded is False
        assert outcome.error

    async def test_status_error_with_response_uses_response(self) -> None:
        request = httpx.Request("GET", "https://example.com/gone")
        response = httpx.Response(503, request=request)
        exc = httpx.HTTPStatusError("server error", request=request, response=response)

        outcome = await probe(_RaisingClient(exc), "https://example.com/gone")

        assert outcome.status_code == 503
        assert outcome.final_url == "https://example.com/gone"

    async def test_unsupported_scheme_yields_no_response(self) -> None:
        exc = httpx.UnsupportedProtocol("Request URL has an unsupported protocol 'mailto:'.")
        outcome = await probe(_RaisingClient(exc), "mailto:someone@example.com")
        assert outcome.status_code is None

    async def test_timeout_yields_no_response(self) -> None:
        outcome = await probe(_HangingClient(), "https://example.com/slow", timeout=0.05)

        assert outcome.status_code is None
        assert "timed out" in (outcome.error or "")

    async def test_empty_url_rejected(self) -> None:
        with pytest.raises(ValueError):
            await probe(_HangingClient(), "")


class TestFinalUrl:
    @pytest.mark.parametrize(
        "href",
        [
            "https://Example.com/ok",
            "https://example.com/a b",
            "https://example.com:443/ok",
        ],
    )
    async def test_href_kept_when_not_redirected(self, href: str) -> None:
        """httpx normalises these URLs; without a redirect the href is reported as-is."""
        with respx.mock:
            respx.get(host="example.com").mock(return_value=httpx.Response(200))
            async with httpx.AsyncClient(follow_redirects=True) as client:
                outcome = await probe(client, href)

        assert outcome == ProbeOutcome(status_code=200, final_url=href)

    async def test_redirect_reports_destination_for_unnormalised_href(self) -> None:
        with respx.mock:
            respx.get("https://example.com/old").mock(
                return_value=httpx.Response(
                    301, headers={"Location": "https://example.com/new"}
                )
            )
            respx.get("https://example.com/new").mock(return_value=httpx.Response(200))
            async with httpx.AsyncClient(follow_redirects=True) as client:
                outcome = await probe(client, "https://EXAMPLE.com/old")

        assert outcome.final_url == "https://example.com/new"

    async def test_status_error_without_redirect_keeps_href(self) -> None:
        request = httpx.Request("GET", "https://Example.com/gone")
        response = httpx.Response(410, request=request)
        exc = httpx.HTTPStatusError("gone", request=request, response=response)

        outcome = await probe(_RaisingClient(exc), "https://Example.com/gone")

        assert outcome == ProbeOutcome(status_code=410, final_url="https://Example.com/gone")
