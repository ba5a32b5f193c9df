"""
Supabase Client

Thin HTTP client for the Supabase REST (PostgREST) and auth (GoTrue) APIs.
Every request carries the project API key; transport failures are raised
to the caller as `SupabaseTransportError`.
"""

import logging
import httpx
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class SupabaseTransportError(Exception):
    """Exception raised when Supabase cannot be reached"""
    pass


class SupabaseClient:
    """Client for communicating with a Supabase project"""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self, bearer: Optional[str] = None, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {bearer or self.api_key}",
        }
        if extra:
            headers.update(extra)
        return headers

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        bearer: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """Make an authenticated request and return the raw response"""
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                return await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=self._headers(bearer, headers)
                )
        except httpx.TimeoutException:
            logger.error(f"Timeout calling Supabase: {method} {path}")
            raise SupabaseTransportError("Supabase timeout")
        except httpx.TransportError as e:
            logger.error(f"Cannot connect to Supabase at {url}: {e}")
            raise SupabaseTransportError("Supabase not available")


def error_message(response: httpx.Response) -> str:
    """Extract the human readable message from a Supabase error body"""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"
