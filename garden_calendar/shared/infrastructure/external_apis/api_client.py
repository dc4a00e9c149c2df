# 📄 File: garden_calendar/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A careful messenger for talking to outside services (like the AI that suggests planting
# dates), which knows how long to wait, when to try again, and how to explain failures.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client over aiohttp with a configurable tenacity retry policy,
# HTTP status to domain exception mapping, call timing/logging and basic statistics.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies
# - garden_calendar.shared.core.exceptions (external API error types)

# 🔄 Connected Modules / Calls From:
# Used by: OpenAIPlantingDateRecommender (single attempt),
# OpenAIPlantProfileGenerator (retrying)

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from garden_calendar.shared.core.exceptions import (
    APIAuthenticationError,
    APIRateLimitError,
    APITimeoutError,
    ExternalAPIError,
)
from garden_calendar.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Transport-level failures worth another attempt. HTTP error statuses are not retried.
RETRYABLE_EXCEPTIONS = (aiohttp.ClientError, asyncio.TimeoutError)


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Retry with exponential backoff (max_retries=1 means a single attempt)
    - HTTP status mapping to ExternalAPIError subclasses
    - Request logging and performance stats
    - Bearer authentication
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        api_name: str,
        timeout: int = 30,
        max_retries: int = 3,
        retry_wait_min: float = 1,
        retry_wait_max: float = 10,
    ):
        """Initialize API client with configuration."""
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_wait_min = retry_wait_min
        self.retry_wait_max = retry_wait_max

        self.session: Optional[ClientSession] = None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0,
            'last_request_time': None,
        }
        self.error_history: List[Dict[str, Any]] = []
        self.max_error_history = 100

    async def initialize(self):
        """Create the underlying aiohttp session."""
        if self.session is not None:
            return

        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers()
        )
        logger.info(f"API client initialized for {self.api_name}")

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        headers = {
            'User-Agent': f'GardenCalendar/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def _build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[Union[Dict, str, bytes]] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        """Make an HTTP request under the client's retry policy."""
        url = self._build_url(endpoint)
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=self.retry_wait_min, max=self.retry_wait_max),
            retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            before_sleep=before_sleep_log(logger.logger, logging.WARNING),
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    return await self._send(method, url, params, data, headers, timeout)
        except Exception as e:
            self.stats['failed_requests'] += 1
            self._record_error(e, method, url)
            transformed = self._transform_exception(e, timeout)
            if transformed is e:
                raise
            raise transformed from e

    async def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict],
        data: Optional[Union[Dict, str, bytes]],
        headers: Optional[Dict],
        timeout: Optional[int]
    ) -> Dict[str, Any]:
        """Perform a single HTTP exchange."""
        if not self.session:
            await self.initialize()

        request_kwargs: Dict[str, Any] = {'method': method, 'url': url}
        if headers:
            request_kwargs['headers'] = headers
        if params:
            request_kwargs['params'] = params
        if data is not None:
            if isinstance(data, dict):
                request_kwargs['json'] = data
            else:
                request_kwargs['data'] = data
        if timeout:
            request_kwargs['timeout'] = ClientTimeout(total=timeout)

        start_time = time.time()
        async with self.session.request(**request_kwargs) as response:
            duration = time.time() - start_time
            self._update_stats(duration)

            success = 200 <= response.status < 300
            logger.log_external_api_call(
                self.api_name, url, method, response.status, duration * 1000, success
            )
            await self._handle_response_status(response)

            try:
                response_data = await response.json(content_type=None)
            except ValueError:
                response_data = {'raw_response': await response.text()}

            self.stats['successful_requests'] += 1
            return response_data

    def _update_stats(self, duration: float):
        self.stats['total_requests'] += 1
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()
        if self.stats['average_response_time'] == 0:
            self.stats['average_response_time'] = duration
        else:
            self.stats['average_response_time'] = (
                self.stats['average_response_time'] * 0.7 + duration * 0.3
            )

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Map HTTP error statuses to API exceptions."""
        if 200 <= response.status < 300:
            return
        if response.status in (401, 403):
            raise APIAuthenticationError(self.api_name, api_status_code=response.status)
        if response.status == 429:
            raise APIRateLimitError(self.api_name, retry_after=response.headers.get('Retry-After'))

        response_text = await response.text()
        kind = "Client" if 400 <= response.status < 500 else "Server"
        raise ExternalAPIError(
            f"{kind} error for {self.api_name} ({response.status})",
            api_name=self.api_name,
            api_status_code=response.status,
            api_response=response_text[:500]
        )

    def _transform_exception(self, exception: Exception, timeout: Optional[int]) -> Exception:
        """Transform transport exceptions to API exceptions."""
        if isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(self.api_name, timeout or self.timeout)
        if isinstance(exception, aiohttp.ClientError):
            return ExternalAPIError(
                f"Connection error for {self.api_name}: {exception}",
                api_name=self.api_name
            )
        return exception

    def _record_error(self, error: Exception, method: str, url: str):
        """Record error for analysis and monitoring."""
        error_record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'error_type': type(error).__name__,
            'error_message': str(error),
            'method': method,
            'url': url,
            'api_name': self.api_name
        }
        self.error_history.append(error_record)
        if len(self.error_history) > self.max_error_history:
            self.error_history = self.error_history[-self.max_error_history:]

        logger.error(f"API error recorded for {self.api_name}", **error_record)

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        """Make GET request."""
        return await self._make_request('GET', endpoint, params, None, headers, timeout)

    async def post(
        self,
        endpoint: str,
        data: Optional[Union[Dict, str, bytes]] = None,
        params: Optional[Dict] = None,
        headers: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        """Make POST request."""
        return await self._make_request('POST', endpoint, params, data, headers, timeout)

    def get_stats(self) -> Dict[str, Any]:
        """Get client performance statistics."""
        return {
            **self.stats,
            'api_name': self.api_name,
            'error_rate': (
                self.stats['failed_requests'] / max(self.stats['total_requests'], 1)
            ) * 100,
        }

    async def close(self):
        """Close the client session and cleanup resources."""
        if self.session:
            await self.session.close()
            self.session = None
            logger.info(f"API client closed for {self.api_name}")


def create_api_client(
    api_name: str,
    base_url: str,
    api_key: Optional[str],
    **kwargs
) -> APIClient:
    """Factory function to create configured API client."""
    return APIClient(
        base_url=base_url,
        api_key=api_key,
        api_name=api_name,
        **kwargs
    )
