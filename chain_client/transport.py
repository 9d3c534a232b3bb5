"""Blocking HTTP transport for the node API."""

from __future__ import annotations

from typing import Any, Optional

import requests
from requests.auth import HTTPBasicAuth

API_KEY_USERNAME = "x"


class HTTPTransport:
    """GET JSON documents from the node, with optional API key auth."""

    def __init__(self, api_key: str = "", timeout: int = 10) -> None:
        self.timeout = timeout
        self.auth: Optional[HTTPBasicAuth] = (
            HTTPBasicAuth(API_KEY_USERNAME, api_key) if api_key else None
        )

    def fetch_json(self, url: str) -> Any:
        response = requests.get(url, auth=self.auth, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
