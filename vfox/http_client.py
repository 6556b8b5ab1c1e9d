"""A small HTTP client offering GET and HEAD requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

import requests


class HttpError(Exception):
    """Raised when a request cannot be made or completed."""


@dataclass
class HttpResponse:
    """What came back from a request; body is None for HEAD."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    content_length: int = -1
    body: Optional[str] = None


def _proxy_map(proxy_url: Optional[str]) -> Optional[dict[str, str]]:
    if not proxy_url:
        return None
    try:
        urlsplit(proxy_url)
    except ValueError:
        return None
    return {"http": proxy_url, "https": proxy_url}


def _content_length(response: requests.Response) -> int:
    value = response.headers.get("Content-Length", "")
    value = value.strip()
    return int(value) if value.isdigit() else -1


class HttpModule:
    """Issues HTTP requests, optionally through a proxy."""

    def __init__(self, proxy_url: Optional[str] = None) -> None:
        self._session = requests.Session()
        self._proxies = _proxy_map(proxy_url)

    def _request(
        self, method: str, url: str, headers: Optional[Mapping[Any, Any]]
    ) -> requests.Response:
        if not url:
            raise HttpError("url is required")
        request_headers = {str(key): str(value) for key, value in (headers or {}).items()}
        try:
            return self._session.request(
                method,
                url,
                headers=request_headers,
                proxies=self._proxies,
                allow_redirects=True,
            )
        except requests.RequestException as err:
            raise HttpError(str(err)) from err

    def get(self, url: str, headers: Optional[Mapping[Any, Any]] = None) -> HttpResponse:
        """Perform a GET request and return status, headers, length and body."""
        response = self._request("GET", url, headers)
        try:
            body = response.text
        except requests.RequestException as err:
            raise HttpError(str(err)) from err
        finally:
            response.close()
        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content_length=_content_length(response),
            body=body,
        )

    def head(self, url: str, headers: Optional[Mapping[Any, Any]] = None) -> HttpResponse:
        """Perform a HEAD request and return status, headers and length."""
        response = self._request("HEAD", url, headers)
        response.close()
        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content_length=_content_length(response),
        )

    def __repr__(self) -> str:
        return f"HttpModule(proxies={self._proxies!r})"