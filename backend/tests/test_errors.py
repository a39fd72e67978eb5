"""
Tests for the error boundary.
"""

import pytest
from httpx import AsyncClient
from starlette.exceptions import HTTPException
from starlette.requests import Request

from planit.api.errors import describe_error, render_error_boundary
from planit.core.config import get_settings
from planit.core.security import sign_session_token
from planit.db.session import get_session_factory
from planit.main import app


@pytest.mark.asyncio
async def test_unknown_route_renders_not_found_page(client: AsyncClient):
    response = await client.get("/no/such/page")
    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>An Error Occurred</title>" in response.text
    assert 'src="/imgs/404-not-found.png"' in response.text
    assert 'alt="Page not found"' in response.text
    assert "The page you are looking for does not exist." in response.text
    assert 'role="alert"' in response.text
    # Rendered inside the shell
    assert '<nav class="top-nav' in response.text
    assert "<footer" in response.text


@pytest.mark.asyncio
async def test_other_http_status_renders_status_text(client: AsyncClient):
    """GET on a POST-only route is a 405 with its reason phrase."""
    response = await client.get("/logout")
    assert response.status_code == 405
    assert "405 Method Not Allowed" in response.text
    assert "<p>Method Not Allowed</p>" in response.text
    assert response.headers["allow"] == "POST"
    assert "404-not-found.png" not in response.text
    assert 'role="alert"' in response.text


@pytest.mark.asyncio
async def test_runtime_fault_renders_message(lenient_client: AsyncClient):
    def broken_factory():
        raise RuntimeError("database is on fire")

    app.dependency_overrides[get_session_factory] = broken_factory

    response = await lenient_client.get("/")
    assert response.status_code == 500
    assert "<title>Something went wrong</title>" in response.text
    assert "<h1>Error</h1>" in response.text
    assert "database is on fire" in response.text
    assert 'role="alert"' in response.text


def test_describe_not_found():
    view = describe_error(HTTPException(status_code=404))
    assert view.kind == "not_found"
    assert view.status_code == 404
    assert view.image == "/imgs/404-not-found.png"


def test_describe_http_error():
    view = describe_error(HTTPException(status_code=403, detail="Members only"))
    assert view.kind == "http"
    assert view.heading == "403 Forbidden"
    assert view.body == "Members only"
    assert view.image is None


def test_describe_runtime_error():
    view = describe_error(ValueError("bad value"))
    assert view.kind == "runtime"
    assert view.status_code == 500
    assert view.title == "Something went wrong"
    assert view.body == "bad value"


@pytest.mark.parametrize("value", ["a string", {"status": 418}, None, 42])
def test_describe_non_exception_value(value):
    view = describe_error(value)
    assert view.kind == "unknown"
    assert view.heading == "Unknown Error"
    assert view.title == "An unknown error occurred"
    assert view.body is None


def _request(headers: dict = None) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def test_non_exception_value_renders_unknown_error_page():
    response = render_error_boundary(_request(), {"status": 418})
    body = response.body.decode()
    assert response.status_code == 500
    assert "<title>An unknown error occurred</title>" in body
    assert "<h1>Unknown Error</h1>" in body
    assert 'role="alert"' in body
    assert '<nav class="top-nav' in body


def test_error_page_nav_follows_signed_session_cookie():
    cookie = f"{get_settings().SESSION_COOKIE_NAME}={sign_session_token(7)}"
    body = render_error_boundary(_request({"Cookie": cookie}), HTTPException(status_code=404)).body.decode()
    assert 'action="/logout"' in body
    assert 'href="/login"' not in body


@pytest.mark.asyncio
async def test_not_found_page_keeps_signed_in_nav(client: AsyncClient, session_cookie):
    response = await client.get("/no/such/page", headers=session_cookie)
    assert response.status_code == 404
    assert 'action="/logout"' in response.text
    assert 'href="/login"' not in response.text
    assert 'href="/signup"' not in response.text


@pytest.mark.asyncio
async def test_not_found_page_signed_out_nav(client: AsyncClient):
    response = await client.get("/no/such/page")
    assert response.status_code == 404
    assert 'href="/login"' in response.text
    assert 'action="/logout"' not in response.text
