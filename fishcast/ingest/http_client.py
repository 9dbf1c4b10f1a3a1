"""Shared httpx request loop with retry and rate limit handling."""

import logging
import time
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES = (429, 503)


class RetryingClient:
    """Base for the public API clients.

    Retries 429/503 responses and transport errors with exponential backoff;
    any other HTTP error is raised immediately.
    """

    service_name = "HTTP"

    def __init__(
        self,
        user_agent: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        all_headers = {"User-Agent": self.user_agent}
        if headers:
            all_headers.update(headers)

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.request(
                    method,
                    url,
                    params=params,
                    content=content,
                    headers=all_headers,
                    timeout=self.timeout,
                )
                if resp.status_code in RETRY_STATUS_CODES and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "%s %s returned %d, retrying in %.1fs (attempt %d/%d)",
                        self.service_name, url, resp.status_code, delay,
                        attempt + 1, self.max_retries,
                    )
                    time.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "%s request error, retrying in %.1fs: %s",
                        self.service_name, delay, e,
                    )
                    time.sleep(delay)
                    continue
                raise

        raise RuntimeError("unreachable: retry loop exited without a response")

    def _get_json(self, url: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        return self._request("GET", url, params=params, **kwargs).json()
