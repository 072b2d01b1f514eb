from __future__ import annotations

import asyncio
import os
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

from .utils.logging import truncate


logger = logging.getLogger("zoho_books_client.http")

MAX_RETRIES = 3
RETRY_DELAYS = [1.0, 2.0, 4.0]

DEFAULT_ACCOUNTS_URL = "https://accounts.zoho.com"
DEFAULT_BASE_URL = "https://www.zohoapis.com/books/v3/"
DEFAULT_SCOPE = "ZohoBooks.fullaccess.all"


def _redact_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    redacted = {}
    for k, v in headers.items():
        if str(k).lower() == "authorization":
            redacted[k] = "[REDACTED]"
        else:
            redacted[k] = v
    return redacted


class ZohoApiError(Exception):
    """Represents an error when communicating with the Zoho Books API.

    ``status_code`` is the HTTP status (None for transport failures) and
    ``code`` is Zoho's own error code from the response body, when present.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


@dataclass
class ZohoApiClient:
    """Minimal async client for the Zoho Books v3 API.

    Every request is scoped to one organization and authenticated with an
    OAuth access token. Uses per-request httpx.AsyncClient with automatic
    retry on transient errors.
    """

    org_id: str
    access_token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    async def from_oauth(
        cls,
        org_id: str,
        client_id: str,
        client_secret: str,
        *,
        accounts_url: Optional[str] = None,
        base_url: Optional[str] = None,
        scope: str = DEFAULT_SCOPE,
    ) -> "ZohoApiClient":
        """Obtain an access token with the client-credentials grant.

        The token is issued for the self client bound to ``org_id``. It is not
        refreshed; create a new client once it expires.
        """
        accounts_url = (accounts_url or DEFAULT_ACCOUNTS_URL).rstrip("/")
        base_url = base_url or DEFAULT_BASE_URL
        if not base_url.endswith("/"):
            base_url = base_url + "/"

        data = {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
            "scope": scope,
            "soid": f"ZohoBooks.{org_id}",
        }
        async with httpx.AsyncClient(timeout=httpx.Timeout(30.0, connect=10.0)) as client:
            response = await client.post(f"{accounts_url}/oauth/v2/token", data=data)

        try:
            body = response.json()
        except Exception:
            body = {}

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if response.status_code != 200 or not access_token:
            error = body.get("error") if isinstance(body, dict) else None
            raise ZohoApiError(
                f"OAuth token request failed: {response.status_code} "
                f"{error or truncate(response.text or '', 200)}",
                status_code=response.status_code,
            )

        logger.debug(
            "OAuth token acquired for org %s (expires_in=%s)",
            org_id,
            body.get("expires_in"),
        )
        return cls(org_id=org_id, access_token=access_token, base_url=base_url)

    @classmethod
    async def from_env(cls) -> "ZohoApiClient":
        """Create a client using environment variables loaded via dotenv.

        Required env vars:
        - ZOHO_ORGANIZATION_ID
        - ZOHO_CLIENT_ID
        - ZOHO_CLIENT_SECRET
        Optional:
        - ZOHO_ACCOUNTS_URL (defaults to the .com data center)
        - ZOHO_BOOKS_BASE_URL (defaults to Books v3 on the .com data center)
        - ZOHO_SCOPE
        """
        load_dotenv(override=False)

        org_id = os.getenv("ZOHO_ORGANIZATION_ID")
        client_id = os.getenv("ZOHO_CLIENT_ID")
        client_secret = os.getenv("ZOHO_CLIENT_SECRET")

        if not org_id or not client_id or not client_secret:
            raise ZohoApiError(
                "Missing ZOHO_ORGANIZATION_ID, ZOHO_CLIENT_ID or ZOHO_CLIENT_SECRET in environment."
            )

        return await cls.from_oauth(
            org_id,
            client_id,
            client_secret,
            accounts_url=os.getenv("ZOHO_ACCOUNTS_URL"),
            base_url=os.getenv("ZOHO_BOOKS_BASE_URL"),
            scope=os.getenv("ZOHO_SCOPE", DEFAULT_SCOPE),
        )

    def _headers(self) -> dict:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Zoho-oauthtoken {self.access_token}",
        }

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Execute HTTP request with per-request client and retry logic."""
        headers = self._headers()
        logger.debug("HTTP headers for %s %s: %s", method.upper(), path, _redact_headers(headers))
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(30.0, connect=10.0),
        ) as client:
            return await self._execute_with_retry(client, method, path, **kwargs)

    async def _execute_with_retry(
        self, client: httpx.AsyncClient, method: str, path: str, **kwargs
    ) -> httpx.Response:
        last_error: Exception | None = None
        for attempt in range(MAX_RETRIES):
            try:
                start = time.perf_counter()
                response = await client.request(method.upper(), path, **kwargs)
                elapsed_ms = (time.perf_counter() - start) * 1000.0

                logger.debug(
                    "HTTP %s %s status=%s elapsed_ms=%.2f",
                    method.upper(),
                    path,
                    response.status_code,
                    elapsed_ms,
                )

                # Don't retry client errors (4xx except 429)
                if 400 <= response.status_code < 500 and response.status_code != 429:
                    return response

                if response.status_code == 429 or response.status_code >= 500:
                    if attempt < MAX_RETRIES - 1:
                        logger.warning(
                            "Retrying %s %s (status %s, attempt %d/%d)",
                            method.upper(), path, response.status_code,
                            attempt + 1, MAX_RETRIES,
                        )
                        await asyncio.sleep(RETRY_DELAYS[attempt])
                        continue

                return response

            except (httpx.TimeoutException, httpx.NetworkError) as e:
                last_error = e
                if attempt < MAX_RETRIES - 1:
                    logger.warning(
                        "Retrying %s %s (%s, attempt %d/%d)",
                        method.upper(), path, type(e).__name__,
                        attempt + 1, MAX_RETRIES,
                    )
                    await asyncio.sleep(RETRY_DELAYS[attempt])
                    continue

        raise ZohoApiError(f"Request failed after {MAX_RETRIES} retries: {last_error}")

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send one organization-scoped request and return the parsed body.

        Raises ZohoApiError on any non-2xx status or when Zoho reports a
        non-zero ``code`` in the body.
        """
        query: Dict[str, Any] = {"organization_id": self.org_id}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})

        kwargs: Dict[str, Any] = {"params": query}
        if json is not None:
            kwargs["json"] = json

        response = await self._request(method, path, **kwargs)
        try:
            data = response.json()
        except Exception:
            data = {"raw": truncate(response.text or "")}
        if not isinstance(data, dict):
            data = {"result": data}

        code = data.get("code")
        if response.status_code in (200, 201) and (code is None or code == 0):
            return data

        message = data.get("message") or truncate(response.text or "", 200)
        raise ZohoApiError(
            f"{method.upper()} {path} error: {response.status_code} {message}",
            status_code=response.status_code,
            code=code,
        )
