# 📄 File: app/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# This file creates a smart HTTP client that knows how to talk to the AI service and the plant
# database reliably, handling timeouts, retries, and errors gracefully so a flaky network does not
# break plant advice.

# 🧪 Purpose (Technical Summary):
# Generic async JSON HTTP client built on aiohttp with tenacity retries for transport failures,
# status-code classification into the typed AI provider error family (subclasses may map to their
# own family), query-string support for GET lookups, and call timing logs.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies
# - app.shared.core.exceptions: AI provider error family

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.plant_care.infrastructure.external.groq_advisor (Groq chat completions),
# app.modules.plant_care.infrastructure.external.perenual_catalog (plant species database),
# app.main (closed on shutdown)

import asyncio
import json
import logging
import time
from typing import Any, Dict, Mapping, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.shared.core.exceptions import (
    AIAuthenticationError,
    AIModelLoadingError,
    AIProviderError,
    AIRateLimitedError,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)
_retry_logger = logging.getLogger(__name__)

# Transport failures worth another attempt; HTTP error statuses are not retried
RETRYABLE_EXCEPTIONS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return max(0, int(float(value)))
    except ValueError:
        return None


def provider_error_for_status(
    api_name: str,
    status_code: int,
    body: str = "",
    headers: Optional[Mapping[str, str]] = None,
) -> AIProviderError:
    """
    Map a failed provider response onto the typed AI error family.

    429 -> rate limited, 401/403 -> auth error, 503 or a "loading" body ->
    model loading, anything else -> generic provider error.
    """
    headers = headers or {}
    retry_after = parse_retry_after(headers.get("Retry-After") or headers.get("retry-after"))
    snippet = (body or "")[:300]

    if status_code == 429:
        return AIRateLimitedError(provider=api_name, provider_status=status_code, retry_after=retry_after)
    if status_code in (401, 403):
        return AIAuthenticationError(provider=api_name, provider_status=status_code)
    if status_code == 503 or "loading" in snippet.lower():
        return AIModelLoadingError(provider=api_name, provider_status=status_code, retry_after=retry_after)
    return AIProviderError(
        message=f"{api_name} request failed with status {status_code}",
        provider=api_name,
        provider_status=status_code,
        details={"service_response": snippet} if snippet else None,
    )


class APIClient:
    """
    Async JSON HTTP client for external API integrations.

    Features:
    - Lazily created aiohttp session (must be created inside a running loop)
    - Retry with exponential backoff on connection errors and timeouts
    - Typed errors for rate limits, auth failures and model warm-up
    - Request timing logs
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_name: str,
        timeout: int = 30,
        max_retries: int = 3
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.session: Optional[ClientSession] = None

    async def initialize(self):
        """Initialize the client session."""
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers()
        )
        logger.info(f"API client initialized for {self.api_name}")

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        headers = {
            'User-Agent': f'PlantCareApp/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def _status_error(self, status_code: int, body: str, headers: Mapping[str, str]) -> Exception:
        return provider_error_for_status(self.api_name, status_code, body, headers)

    def _transport_error(self, message: str, details: Optional[Dict[str, Any]] = None) -> Exception:
        return AIProviderError(message=message, provider=self.api_name, details=details)

    async def _request_once(
        self,
        method: str,
        url: str,
        payload: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        start_time = time.perf_counter()
        async with self.session.request(method, url, json=payload, params=params) as response:
            duration_ms = (time.perf_counter() - start_time) * 1000
            body = await response.text()
            success = 200 <= response.status < 300
            logger.performance.log_external_api_call(
                api_name=self.api_name,
                endpoint=url,
                method=method,
                status_code=response.status,
                duration_ms=duration_ms,
                success=success
            )

            if not success:
                raise self._status_error(response.status, body, response.headers)

            try:
                data = json.loads(body) if body else {}
            except json.JSONDecodeError:
                data = {'raw_response': body}
            return data if isinstance(data, dict) else {'data': data}

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Make an HTTP request, retrying transport failures."""
        if not self.session or self.session.closed:
            await self.initialize()

        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
                before_sleep=before_sleep_log(_retry_logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    return await self._request_once(method, url, payload, params)
        except asyncio.TimeoutError:
            logger.error(f"{self.api_name} request timed out: {method} {url}")
            raise self._transport_error(f"{self.api_name} request timed out")
        except aiohttp.ClientError as e:
            logger.error(f"{self.api_name} transport error: {e}")
            raise self._transport_error(f"{self.api_name} is unreachable", {"reason": str(e)})

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make GET request."""
        return await self.request('GET', endpoint, params=params)

    async def post(self, endpoint: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make POST request."""
        return await self.request('POST', endpoint, payload)

    async def close(self):
        """Close the underlying session."""
        if self.session and not self.session.closed:
            await self.session.close()
            logger.info(f"API client closed for {self.api_name}")
        self.session = None

    async def __aenter__(self):
        if not self.session or self.session.closed:
            await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
