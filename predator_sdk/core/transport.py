"""
HTTP transport for the Predator API.

A thin async wrapper around a ``requests.Session``: each call runs in a worker
thread via ``asyncio.to_thread`` so the event loop is never blocked. Failures
are raised as the underlying ``requests`` exceptions; classification happens
in the client.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from predator_sdk.utils.config import SdkConfig


def build_http_session(cfg: SdkConfig) -> requests.Session:
    """Return a requests Session with the configured default headers (no retries)."""
    sess = requests.Session()
    sess.headers.update(cfg.Headers)
    return sess


def decode_body(resp: requests.Response) -> Any:
    """Parsed JSON body, the raw text when it is not JSON, or None when empty."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class HttpTransport:
    """Async JSON GET/POST against a single base URL."""

    def __init__(
        self,
        cfg: SdkConfig,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
    ):
        self.cfg = cfg
        self.base_url = cfg.BaseUrl.rstrip("/")
        self.timeout = cfg.RequestTimeout
        self.logger = logger or logging.getLogger(__name__)
        self.session = session or build_http_session(cfg)

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _send(self, method: str, endpoint: str, body: Optional[Dict[str, Any]] = None) -> Any:
        url = self._url(endpoint)
        self.logger.debug(f"{method} {url}")
        resp = self.session.request(method, url, json=body, timeout=self.timeout)
        self.logger.debug(f"{method} {url} -> HTTP {resp.status_code}")
        resp.raise_for_status()
        return decode_body(resp)

    async def get(self, endpoint: str) -> Any:
        return await asyncio.to_thread(self._send, "GET", endpoint)

    async def post(self, endpoint: str, body: Dict[str, Any]) -> Any:
        return await asyncio.to_thread(self._send, "POST", endpoint, body)

    def close(self) -> None:
        try:
            self.session.close()
        except Exception:  # pragma: no cover
            self.logger.exception("failed to close session")
